"""
Card - Learning record for a single vocabulary item

Tracks learning progress only. Headword, definition and other content live
outside the scheduler.

Key fields:
- state: 0 = New, 1..4 = Learning steps, 5 = Mastered
- interval: days until the next scheduled review
- due: when the card becomes eligible for standard review (UTC)
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

from srs.scheduling.constants import CardStage


CardId = Union[str, int]


def utc_now() -> datetime:
    """Default clock for the scheduler."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """
    Normalize a timestamp to aware UTC.

    Naive values are taken to already be UTC (SQLite drops tzinfo).
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class Card:
    """
    Learning state for one card in one deck.

    Immutable: the scheduler returns new records instead of editing this one.
    """
    id: CardId
    deck_id: CardId
    state: int
    interval: int
    due: datetime

    @property
    def stage(self) -> CardStage:
        return CardStage(self.state)

    @property
    def is_new(self) -> bool:
        return self.state == CardStage.NEW

    @property
    def is_mastered(self) -> bool:
        return self.state == CardStage.MASTERED

    def is_due(self, now: datetime) -> bool:
        """Eligible for standard review at `now` (Mastered cards never are)."""
        return not self.is_mastered and as_utc(self.due) <= as_utc(now)


def new_card(card_id: CardId, deck_id: CardId, now: Optional[datetime] = None) -> Card:
    """
    Initialize state for a card that was just imported into a deck.

    Args:
        card_id: Identifier assigned by persistence
        deck_id: Owning deck
        now: Creation time (defaults to now)

    Returns:
        New Card with state 0, interval 0, due immediately
    """
    if now is None:
        now = utc_now()

    return Card(
        id=card_id,
        deck_id=deck_id,
        state=int(CardStage.NEW),
        interval=0,
        due=as_utc(now),
    )
