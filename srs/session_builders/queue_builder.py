"""
Session Queue Builder - Mode-based session creation

Creates study queues for one deck in one of three modes:
1. standard: cards with due <= now (not Mastered), oldest due first
2. weak: cards below the confidence threshold, regardless of due
3. cram: a fixed number of cards from the whole deck, seeded shuffle

Session Logic:
- Pass removes the card from the queue for the rest of the session
- Fail pushes the card a few places back so it is seen again
- The session ends when the queue is empty
"""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Callable, Optional

from srs.config import Settings
from srs.persistence import CardStore
from srs.scheduling.card import Card, CardId, utc_now
from srs.session_builders.queue_types import STUDY_MODES, SessionQueue, StudyMode
from srs.session_builders.queue_utils import (
    due_cards_from_snapshot,
    sample_cram_cards,
    take,
    weak_cards_from_snapshot,
)

logger = logging.getLogger(__name__)


def select_cards(
    all_cards: list[Card],
    mode: StudyMode,
    now: datetime,
    weak_threshold: int,
    count: int,
    limit: Optional[int] = None,
    seed: Optional[int] = None
) -> list[Card]:
    """
    Pick and order the cards for a session from a deck snapshot.

    Args:
        all_cards: Every card in the deck
        mode: standard, weak or cram
        now: Reference time for due checks
        weak_threshold: state below this is weak
        count: Number of cards for cram mode
        limit: Optional cap for standard and weak modes
        seed: Random seed for cram mode

    Returns:
        Ordered list of cards
    """
    if mode == "standard":
        return take(due_cards_from_snapshot(all_cards, now), limit)
    if mode == "weak":
        return take(weak_cards_from_snapshot(all_cards, weak_threshold), limit)
    if mode == "cram":
        if count < 0:
            raise ValueError(f"Cram count must be >= 0, got {count}")
        return sample_cram_cards(all_cards, count, seed)
    raise ValueError(f"Unknown study mode: {mode!r} (expected one of {', '.join(STUDY_MODES)})")


def create_queue(
    deck_id: CardId,
    all_cards: list[Card],
    mode: StudyMode = "standard",
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
    practice: bool = False,
    count: Optional[int] = None,
    limit: Optional[int] = None,
    seed: Optional[int] = None
) -> SessionQueue:
    """
    Create a session queue from a deck snapshot (no DB calls).

    An empty deck gives an empty queue, which is a finished session.
    """
    if settings is None:
        settings = Settings()
    if now is None:
        now = utc_now()
    if count is None:
        count = settings.session_size

    selected = select_cards(
        all_cards,
        mode,
        now,
        weak_threshold=settings.weak_threshold,
        count=count,
        limit=limit,
        seed=seed,
    )

    return SessionQueue(
        deck_id=deck_id,
        mode=mode,
        order=[card.id for card in selected],
        cards={card.id: card for card in selected},
        practice=practice,
        requeue_offset=settings.requeue_offset,
    )


class SessionQueueBuilder:
    """
    Builds session queues from a card store.

    The store and clock are injected; the builder keeps no other state.
    """

    def __init__(
        self,
        store: CardStore,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        self.store = store
        self.settings = settings or Settings()
        self.clock = clock

    def build(
        self,
        deck_id: CardId,
        mode: StudyMode = "standard",
        practice: bool = False,
        count: Optional[int] = None,
        limit: Optional[int] = None,
        seed: Optional[int] = None
    ) -> SessionQueue:
        """
        Load the deck and build a queue for the given mode.

        Args:
            deck_id: Deck to study
            mode: standard, weak or cram
            practice: If True, reviews are not persisted
            count: Cram size (defaults to settings.session_size)
            limit: Optional cap for standard and weak modes
            seed: Random seed for cram mode

        Returns:
            SessionQueue (possibly empty)
        """
        all_cards = self.store.load_cards_for_deck(deck_id) or []
        queue = create_queue(
            deck_id,
            all_cards,
            mode=mode,
            now=self.clock(),
            settings=self.settings,
            practice=practice,
            count=count,
            limit=limit,
            seed=seed,
        )
        logger.info(
            "Built %s queue for deck %s: %d of %d cards%s",
            mode, deck_id, len(queue), len(all_cards),
            " (practice)" if practice else "",
        )
        return queue
