"""Tests for srs/scheduling/scheduler.py -- review transitions."""

from datetime import datetime, timedelta

import pytest

from srs.exceptions import InvalidCardError
from srs.scheduling import (
    CardStage,
    Rating,
    advance_card,
    apply_review,
    get_ladder,
    new_card,
    review_card,
)

from conftest import T0


def test_new_card_defaults():
    card = new_card("x", deck_id=7, now=T0)
    assert card.state == 0
    assert card.interval == 0
    assert card.due == T0
    assert card.is_new
    assert card.is_due(T0)


def test_pass_new_card(make_card):
    """Scenario 1: a New card that passes goes to step 1 with 2 days."""
    result = review_card(make_card("a"), Rating.PASS, T0)
    assert result.state == 1
    assert result.interval == 2
    assert result.due == T0 + timedelta(days=2)


def test_fail_at_step_one_stays_at_floor(make_card):
    """Scenario 2: failing at step 1 keeps step 1 and its interval."""
    card = make_card("a", state=1, interval=2)
    result = review_card(card, Rating.FAIL, T0)
    assert result.state == 1
    assert result.interval == 2


def test_fail_sets_short_retry_due(make_card):
    """A failed card falls back to a 10 minute retry, not now + interval."""
    card = make_card("a", state=3, interval=10)
    result = review_card(card, Rating.FAIL, T0)
    assert result.state == 2
    assert result.interval == 5
    assert result.due == T0 + timedelta(minutes=10)


def test_fail_custom_short_retry(make_card):
    result = review_card(make_card("a", state=2, interval=5), "fail", T0, short_retry_minutes=30)
    assert result.due == T0 + timedelta(minutes=30)


def test_pass_last_step_masters(make_card):
    """Scenario 3: passing step 4 masters the card."""
    card = make_card("a", state=4, interval=20)
    result = review_card(card, Rating.PASS, T0)
    assert result.state == CardStage.MASTERED
    assert result.interval == 36500
    assert result.due == T0 + timedelta(days=36500)


def test_pass_mastered_is_idempotent(make_card):
    """Scenario 4: Mastered stays Mastered."""
    card = make_card("a", state=5, interval=36500)
    result = review_card(card, Rating.PASS, T0)
    assert result.state == 5
    assert result.interval == 36500


@pytest.mark.parametrize("start_state", range(0, 6))
def test_repeated_pass_reaches_mastery(make_card, start_state):
    """Pass from any state masters within max_step reviews and stays there."""
    ladder = get_ladder("standard")
    card = make_card("a", state=start_state, interval=ladder.interval_for_step(start_state))
    if start_state == 5:
        card = make_card("a", state=5, interval=36500)

    now = T0
    for _ in range(ladder.max_step()):
        previous_state = card.state
        card = advance_card(card, Rating.PASS, now)
        assert card.state >= previous_state
        now = card.due

    assert card.state == CardStage.MASTERED
    assert card.interval == ladder.mastery_interval_sentinel()

    again = advance_card(card, Rating.PASS, now)
    assert again.state == CardStage.MASTERED
    assert again.interval == ladder.mastery_interval_sentinel()


@pytest.mark.parametrize("start_state", range(0, 6))
def test_fail_never_below_step_one(make_card, start_state):
    card = make_card("a", state=start_state)
    result = review_card(card, Rating.FAIL, T0)
    assert result.state == max(1, start_state - 1)
    assert result.state >= 1


@pytest.mark.parametrize("start_state", range(0, 6))
def test_pass_due_is_now_plus_interval(make_card, start_state):
    now = datetime(2024, 12, 31, 23, 30, tzinfo=T0.tzinfo)
    result = review_card(make_card("a", state=start_state), Rating.PASS, now)
    assert result.due == now + timedelta(days=result.interval)


def test_pass_intervals_follow_ladder(make_card):
    card = make_card("a")
    intervals = []
    for _ in range(5):
        card = advance_card(card, Rating.PASS, T0)
        intervals.append(card.interval)
    assert intervals == [2, 5, 10, 20, 36500]


def test_classic_profile_resets_on_fail(make_card):
    ladder = get_ladder("classic")
    card = make_card("a", state=4, interval=30)
    result = review_card(card, Rating.FAIL, T0, ladder=ladder)
    assert result.state == 1
    assert result.interval == 0
    assert result.due == T0 + timedelta(minutes=10)


def test_classic_reset_card_climbs_from_step_one(make_card):
    ladder = get_ladder("classic")
    card = advance_card(make_card("a", state=3, interval=12), Rating.FAIL, T0, ladder=ladder)
    card = advance_card(card, Rating.PASS, T0, ladder=ladder)
    assert card.state == 2
    assert card.interval == 3
    assert card.due == T0 + timedelta(days=3)


def test_classic_profile_ladder(make_card):
    ladder = get_ladder("classic")
    card = make_card("a")
    intervals = []
    for _ in range(5):
        card = advance_card(card, Rating.PASS, T0, ladder=ladder)
        intervals.append(card.interval)
    assert intervals == [1, 3, 12, 30, 36500]


def test_review_does_not_mutate_input(make_card):
    card = make_card("a", state=2, interval=5)
    result = review_card(card, Rating.PASS, T0)
    assert card.state == 2
    assert card.interval == 5
    assert card.due == T0

    updated = apply_review(card, result)
    assert updated is not card
    assert updated.id == card.id
    assert updated.deck_id == card.deck_id
    assert updated.state == 3


def test_string_ratings_are_coerced(make_card):
    assert review_card(make_card("a"), "PASS", T0).state == 1
    assert review_card(make_card("a"), " fail ", T0).state == 1


def test_unknown_rating_rejected(make_card):
    with pytest.raises(ValueError):
        review_card(make_card("a"), "hard", T0)
    with pytest.raises(ValueError):
        review_card(make_card("a"), 3, T0)


@pytest.mark.parametrize("bad_state", [-1, 6, 42])
def test_state_out_of_range_fails_fast(make_card, bad_state):
    with pytest.raises(InvalidCardError):
        review_card(make_card("a", state=bad_state), Rating.PASS, T0)


def test_negative_interval_fails_fast(make_card):
    with pytest.raises(InvalidCardError):
        review_card(make_card("a", state=1, interval=-2), Rating.PASS, T0)


def test_naive_now_is_treated_as_utc(make_card):
    naive = datetime(2024, 3, 1, 9, 0)
    result = review_card(make_card("a"), Rating.PASS, naive)
    assert result.due == T0 + timedelta(days=2)
    assert result.due.tzinfo is not None
