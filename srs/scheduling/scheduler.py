"""
Scheduler - Review Transition Logic

Pure ladder scheduling (no database calls, no mutation).

Main workflow:
1. Load card (caller's responsibility)
2. Compute the transition for a Pass/Fail rating
3. Return the new state, interval and due time
4. Persist the result (caller's responsibility)

This module handles ONLY the algorithm logic.
Database I/O is handled by the persistence adapters.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional, Union

from srs.exceptions import InvalidCardError
from srs.scheduling.card import Card, as_utc, utc_now
from srs.scheduling.constants import CardStage, Rating, SHORT_RETRY_MINUTES
from srs.scheduling.ladder import DEFAULT_LADDER, IntervalLadder


@dataclass(frozen=True)
class ReviewResult:
    """Outcome of a single review: the fields to write back onto the card."""
    state: int
    interval: int
    due: datetime


def coerce_rating(rating: Union[Rating, str]) -> Rating:
    """
    Accept a Rating or its string value ("pass" / "fail").

    Raises:
        ValueError: for anything else
    """
    if isinstance(rating, Rating):
        return rating
    if isinstance(rating, str):
        return Rating(rating.strip().lower())
    raise ValueError(f"Unrecognized rating: {rating!r}")


def validate_card(card: Card, ladder: IntervalLadder = DEFAULT_LADDER) -> None:
    """
    Fail fast on records outside the valid domain.

    Raises:
        InvalidCardError: state outside [0, max_step] or negative interval
    """
    if isinstance(card.state, bool) or not isinstance(card.state, int):
        raise InvalidCardError(f"Card {card.id}: state must be an int, got {card.state!r}")
    if not 0 <= card.state <= ladder.max_step():
        raise InvalidCardError(
            f"Card {card.id}: state {card.state} outside [0, {ladder.max_step()}]"
        )
    if card.interval < 0:
        raise InvalidCardError(f"Card {card.id}: negative interval {card.interval}")


def review_card(
    card: Card,
    rating: Union[Rating, str],
    now: Optional[datetime] = None,
    ladder: IntervalLadder = DEFAULT_LADDER,
    short_retry_minutes: int = SHORT_RETRY_MINUTES
) -> ReviewResult:
    """
    Compute the next state, interval and due time for a reviewed card.

    Pass moves one step up the ladder; passing the last rung masters the
    card with the sentinel interval. Fail demotes (never below step 1) and
    sets due to a short retry so the card is not lost if the session is
    abandoned; in-session re-presentation is the queue's job.

    Args:
        card: Card being reviewed (not modified)
        rating: PASS or FAIL
        now: Review timestamp (defaults to now)
        ladder: Interval ladder profile
        short_retry_minutes: Fallback delay for failed cards

    Returns:
        ReviewResult with the new state, interval and due
    """
    rating = coerce_rating(rating)
    validate_card(card, ladder)

    if now is None:
        now = utc_now()
    now = as_utc(now)

    if rating is Rating.PASS:
        return _apply_pass(card, now, ladder)
    return _apply_fail(card, now, ladder, short_retry_minutes)


def _apply_pass(card: Card, now: datetime, ladder: IntervalLadder) -> ReviewResult:
    max_step = ladder.max_step()
    new_step = min(card.state + 1, max_step)

    if new_step >= max_step:
        state = int(CardStage.MASTERED)
        interval = ladder.mastery_interval_sentinel()
    else:
        state = new_step
        interval = ladder.interval_for_step(max(1, new_step))

    return ReviewResult(
        state=state,
        interval=interval,
        due=now + timedelta(days=interval)
    )


def _apply_fail(
    card: Card,
    now: datetime,
    ladder: IntervalLadder,
    short_retry_minutes: int
) -> ReviewResult:
    if ladder.reset_on_fail:
        # Back to step 1 on the New rung
        new_step = 1
        interval = ladder.interval_for_step(0)
    else:
        new_step = max(1, card.state - 1)
        interval = ladder.interval_for_step(new_step)

    return ReviewResult(
        state=new_step,
        interval=interval,
        due=now + timedelta(minutes=short_retry_minutes)
    )


def apply_review(card: Card, result: ReviewResult) -> Card:
    """Return a copy of `card` carrying the reviewed state."""
    return replace(card, state=result.state, interval=result.interval, due=result.due)


def advance_card(
    card: Card,
    rating: Union[Rating, str],
    now: Optional[datetime] = None,
    ladder: IntervalLadder = DEFAULT_LADDER,
    short_retry_minutes: int = SHORT_RETRY_MINUTES
) -> Card:
    """Review and apply in one step."""
    result = review_card(card, rating, now, ladder, short_retry_minutes)
    return apply_review(card, result)
