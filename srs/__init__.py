"""
Spaced-repetition scheduling engine for vocabulary flashcards.

Quick start:
    from srs import InMemoryCardStore, SessionQueueBuilder, StudySession, Rating

    builder = SessionQueueBuilder(store)
    session = StudySession.start(builder, deck_id=1, mode="standard")
    while not session.is_finished:
        card = session.current_card()
        session.record_review(Rating.PASS)
    summary = session.end()
"""

from srs.config import Settings
from srs.exceptions import (
    InvalidCardError,
    LadderConfigError,
    SessionFinishedError,
    SrsError,
)
from srs.persistence import CardStore
from srs.scheduling import (
    Card,
    CardStage,
    InMemoryCardStore,
    IntervalLadder,
    Rating,
    ReviewResult,
    SqlCardStore,
    advance_card,
    get_ladder,
    new_card,
    review_card,
)
from srs.session_builders import SessionQueue, SessionQueueBuilder, create_queue
from srs.session_controller import ReviewOutcome, StudySession
from srs.session_summary import SessionSummary, SummarySnapshot

__all__ = [
    "Settings",
    "InvalidCardError",
    "LadderConfigError",
    "SessionFinishedError",
    "SrsError",
    "CardStore",
    "Card",
    "CardStage",
    "InMemoryCardStore",
    "IntervalLadder",
    "Rating",
    "ReviewResult",
    "SqlCardStore",
    "advance_card",
    "get_ladder",
    "new_card",
    "review_card",
    "SessionQueue",
    "SessionQueueBuilder",
    "create_queue",
    "ReviewOutcome",
    "StudySession",
    "SessionSummary",
    "SummarySnapshot",
]
