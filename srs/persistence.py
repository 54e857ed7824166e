"""
Persistence contract consumed by the scheduling engine.

The engine never owns storage. Hosts pass a CardStore into the queue
builder and the study session; adapters live in srs.scheduling.
"""

from __future__ import annotations

from typing import Awaitable, Optional, Protocol, runtime_checkable

from srs.scheduling.card import Card, CardId


@runtime_checkable
class CardStore(Protocol):
    """
    Load/save interface for card records.

    save_card upserts by id and must tolerate repeated calls for the same
    card. It may return an awaitable; the session does not wait for it.
    """

    def load_cards_for_deck(self, deck_id: CardId) -> list[Card]:
        ...

    def save_card(self, card: Card) -> Optional[Awaitable[None]]:
        ...
