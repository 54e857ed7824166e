"""Shared fixtures for the scheduler tests."""

from datetime import datetime, timedelta, timezone

import pytest

from srs.scheduling import Card, InMemoryCardStore


T0 = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    """Injectable clock that only moves when told to."""

    def __init__(self, start=T0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


def _make_card(card_id, state=0, interval=0, due=T0, deck_id=1):
    return Card(id=card_id, deck_id=deck_id, state=state, interval=interval, due=due)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_card():
    return _make_card


@pytest.fixture
def five_due_cards():
    """Five due cards in deck 1, due one hour apart (a is oldest)."""
    return [
        _make_card(card_id, due=T0 - timedelta(hours=5 - i))
        for i, card_id in enumerate(["a", "b", "c", "d", "e"])
    ]


@pytest.fixture
def store(five_due_cards):
    return InMemoryCardStore(five_due_cards)
