"""
Session lifecycle helpers.

A StudySession walks a SessionQueue: it reviews the card at the head,
re-queues or drops it, tallies the result and writes the new card state
back through the store (unless the session is practice).
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable, Optional, Union

from srs.config import Settings
from srs.exceptions import SessionFinishedError
from srs.persistence import CardStore
from srs.scheduling.card import Card, CardId, utc_now
from srs.scheduling.constants import Rating
from srs.scheduling.scheduler import apply_review, coerce_rating, review_card
from srs.session_builders.queue_builder import SessionQueueBuilder
from srs.session_builders.queue_types import SessionQueue, StudyMode
from srs.session_summary import SessionSummary, SummarySnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewOutcome:
    """
    One review event within a session.
    """
    session_id: str
    session_position: int
    rating: Rating
    card_before: Card
    card_after: Card
    requeued: bool
    write_back: bool
    timestamp: datetime


async def _await_save(pending: Awaitable[None]) -> None:
    await pending


class StudySession:
    """
    Session-scoped study state for one deck and mode.
    """

    def __init__(
        self,
        queue: SessionQueue,
        store: CardStore,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = utc_now,
        session_id: Optional[str] = None
    ):
        self.queue = queue
        self.store = store
        self.settings = settings or Settings()
        self.clock = clock
        self.session_id = session_id or str(uuid.uuid4())
        self.summary = SessionSummary()
        self.position = 0
        self.outcomes: list[ReviewOutcome] = []
        self.ended = False
        self._pending_saves: set[asyncio.Future] = set()

    @classmethod
    def start(
        cls,
        builder: SessionQueueBuilder,
        deck_id: CardId,
        mode: StudyMode = "standard",
        practice: bool = False,
        count: Optional[int] = None,
        limit: Optional[int] = None,
        seed: Optional[int] = None,
        session_id: Optional[str] = None
    ) -> "StudySession":
        """
        Start a new study session for a deck.
        """
        queue = builder.build(
            deck_id,
            mode=mode,
            practice=practice,
            count=count,
            limit=limit,
            seed=seed,
        )
        return cls(
            queue,
            builder.store,
            settings=builder.settings,
            clock=builder.clock,
            session_id=session_id,
        )

    @property
    def practice(self) -> bool:
        """True when review results must not be persisted."""
        return self.queue.practice

    @property
    def is_finished(self) -> bool:
        return self.ended or self.queue.is_empty

    @property
    def pending_save_count(self) -> int:
        return len(self._pending_saves)

    def current_card(self) -> Optional[Card]:
        """Card to present next, or None when the session is finished."""
        if self.ended:
            return None
        return self.queue.head()

    def record_review(self, rating: Union[Rating, str]) -> ReviewOutcome:
        """
        Process user feedback for the current card and move on.

        Raises:
            SessionFinishedError: if there is no card left to review
            Whatever store.save_card raises. The review is already applied
            in-session by then; retry the save with outcomes[-1].card_after.
        """
        card = self.current_card()
        if card is None:
            raise SessionFinishedError(f"Session {self.session_id} has no cards left")

        rating = coerce_rating(rating)
        now = self.clock()
        result = review_card(
            card,
            rating,
            now,
            ladder=self.settings.ladder,
            short_retry_minutes=self.settings.short_retry_minutes,
        )
        updated_card = apply_review(card, result)

        self.queue.update_card(updated_card)
        requeued = rating is Rating.FAIL
        if requeued:
            self.queue.requeue(card.id)
        else:
            self.queue.remove(card.id)

        self.summary.record(rating)

        outcome = ReviewOutcome(
            session_id=self.session_id,
            session_position=self.position,
            rating=rating,
            card_before=card,
            card_after=updated_card,
            requeued=requeued,
            write_back=not self.practice,
            timestamp=now,
        )
        self.outcomes.append(outcome)
        self.position += 1

        if not self.practice:
            self._persist(updated_card)

        return outcome

    def _persist(self, card: Card) -> None:
        """
        Hand a reviewed card to the store without waiting on async saves.
        """
        pending = self.store.save_card(card)
        if not inspect.isawaitable(pending):
            return

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # No loop to hand the save to: run it in place
            asyncio.run(_await_save(pending))
            return

        task = asyncio.ensure_future(pending)
        self._pending_saves.add(task)
        task.add_done_callback(self._on_save_done)

    def _on_save_done(self, task: asyncio.Future) -> None:
        self._pending_saves.discard(task)
        if task.cancelled():
            logger.warning("Card save cancelled in session %s", self.session_id)
            return
        error = task.exception()
        if error is not None:
            logger.error("Card save failed in session %s: %s", self.session_id, error)

    async def wait_for_saves(self) -> None:
        """Wait for any asynchronous saves still in flight."""
        while self._pending_saves:
            await asyncio.gather(*list(self._pending_saves), return_exceptions=True)

    def end(self) -> SummarySnapshot:
        """
        End the current session (finished or abandoned).

        Every review already wrote its own fallback due, so nothing is
        flushed here.
        """
        if not self.ended:
            self.ended = True
            remaining = len(self.queue)
            snapshot = self.summary.snapshot()
            if remaining:
                logger.info(
                    "Session %s abandoned with %d card(s) left (%d pass, %d fail)",
                    self.session_id, remaining, snapshot.pass_count, snapshot.fail_count,
                )
            else:
                logger.info(
                    "Session %s complete (%d pass, %d fail)",
                    self.session_id, snapshot.pass_count, snapshot.fail_count,
                )
        return self.summary.snapshot()
