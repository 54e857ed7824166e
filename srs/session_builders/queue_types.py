"""
Typed queue models shared across session builders.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, Optional

from srs.scheduling.card import Card, CardId
from srs.scheduling.constants import REQUEUE_OFFSET


StudyMode = Literal["standard", "weak", "cram"]
STUDY_MODES: tuple[str, ...] = ("standard", "weak", "cram")


@dataclass
class SessionQueue:
    """
    Session-scoped work list for a deck.

    The head of `order` is the card currently presented. Each card id
    appears at most once. `cards` holds the latest in-session snapshot of
    every card that entered the queue, including ones already passed.
    """
    deck_id: CardId
    mode: StudyMode
    order: list[CardId]
    cards: dict[CardId, Card]
    practice: bool = False
    requeue_offset: int = REQUEUE_OFFSET
    initial_size: int = field(init=False)

    def __post_init__(self):
        if len(set(self.order)) != len(self.order):
            raise ValueError("Session queue contains duplicate card ids")
        missing = [card_id for card_id in self.order if card_id not in self.cards]
        if missing:
            raise ValueError(f"Session queue references unknown cards: {missing}")
        if self.requeue_offset < 1:
            raise ValueError(f"requeue_offset must be >= 1, got {self.requeue_offset}")
        self.initial_size = len(self.order)

    def __len__(self) -> int:
        return len(self.order)

    @property
    def is_empty(self) -> bool:
        return not self.order

    def head(self) -> Optional[Card]:
        """Card currently presented, or None when the queue is exhausted."""
        if not self.order:
            return None
        return self.cards[self.order[0]]

    def update_card(self, card: Card) -> None:
        """Replace the in-session snapshot of a card."""
        if card.id not in self.cards:
            raise KeyError(card.id)
        self.cards[card.id] = card

    def remove(self, card_id: CardId) -> None:
        """
        Drop a passed card from the active queue for the rest of the session.
        """
        self.order.remove(card_id)

    def requeue(self, card_id: CardId) -> int:
        """
        Move a failed card `requeue_offset` places back.

        If fewer cards remain than the offset, the card goes to the end.

        Returns:
            New index of the card in the queue
        """
        self.order.remove(card_id)
        position = min(self.requeue_offset, len(self.order))
        self.order.insert(position, card_id)
        return position
