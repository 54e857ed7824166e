"""
In-memory card store.

Dict-backed CardStore for tests and for hosts that keep their own storage.
Cards are immutable, so holding references is the same as holding copies.
"""

from __future__ import annotations

from typing import Iterable, Optional

from srs.scheduling.card import Card, CardId


class InMemoryCardStore:
    """CardStore keyed by card id."""

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: dict[CardId, Card] = {}
        self.save_count = 0
        for card in cards or []:
            self._cards[card.id] = card

    def load_cards_for_deck(self, deck_id: CardId) -> list[Card]:
        return [card for card in self._cards.values() if card.deck_id == deck_id]

    def load_card(self, card_id: CardId) -> Optional[Card]:
        return self._cards.get(card_id)

    def save_card(self, card: Card) -> None:
        self._cards[card.id] = card
        self.save_count += 1
