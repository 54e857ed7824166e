"""
Queue utilities for session builders.

Selection helpers that work on a deck snapshot (no DB calls).
"""

from __future__ import annotations
import random
from datetime import datetime
from typing import Optional

from srs.scheduling.card import Card, as_utc


def _id_key(card: Card) -> str:
    return str(card.id)


def due_cards_from_snapshot(all_cards: list[Card], now: datetime) -> list[Card]:
    """
    Filter and sort due cards, oldest due first.

    Mastered cards are never due.
    """
    now = as_utc(now)
    due_cards = [c for c in all_cards if c.is_due(now)]
    due_cards.sort(key=lambda c: (as_utc(c.due), _id_key(c)))
    return due_cards


def weak_cards_from_snapshot(all_cards: list[Card], threshold: int) -> list[Card]:
    """
    Cards below the confidence threshold, regardless of due.

    Lowest state first, then earliest due.
    """
    weak_cards = [c for c in all_cards if c.state < threshold]
    weak_cards.sort(key=lambda c: (c.state, as_utc(c.due), _id_key(c)))
    return weak_cards


def sample_cram_cards(
    all_cards: list[Card],
    count: int,
    seed: Optional[int] = None
) -> list[Card]:
    """
    Sample up to `count` cards from the whole deck.

    The snapshot is sorted by id before sampling so the same seed gives the
    same session whatever order the store returned.
    """
    if count <= 0:
        return []

    pool = sorted(all_cards, key=_id_key)
    rng = random.Random(seed)
    return rng.sample(pool, min(count, len(pool)))


def take(cards: list[Card], limit: Optional[int]) -> list[Card]:
    """Truncate to `limit` when one is given."""
    if limit is None:
        return list(cards)
    return list(cards[:max(0, limit)])
