"""
Ladder Scheduler - Spaced repetition with a fixed interval ladder

Main API for the flashcard learning engine.

This package implements:
- A 6-level card state (New, four Learning steps, Mastered)
- A configurable interval ladder with a mastery sentinel
- A pure Pass/Fail review transition
- Card store adapters (in-memory and SQL)

Quick start:
    from srs import scheduling

    # Process a review (algorithm only, no DB calls)
    updated = scheduling.advance_card(card, scheduling.Rating.PASS)

    # Persist it
    store = scheduling.SqlCardStore.from_env()
    store.init_db()
    store.save_card(updated)
"""

# Core scheduler API (algorithm logic)
from srs.scheduling.scheduler import (
    ReviewResult,
    advance_card,
    apply_review,
    coerce_rating,
    review_card,
    validate_card,
)

# Card record
from srs.scheduling.card import (
    Card,
    CardId,
    as_utc,
    new_card,
    utc_now,
)

# Ladder policy
from srs.scheduling.ladder import (
    DEFAULT_LADDER,
    LADDER_PROFILES,
    IntervalLadder,
    get_ladder,
)

# Constants and parameters
from srs.scheduling.constants import (
    CardStage,
    Rating,
    MASTERY_INTERVAL_DAYS,
    REQUEUE_OFFSET,
    SHORT_RETRY_MINUTES,
    WEAK_THRESHOLD,
)

# Storage adapters
from srs.scheduling.memory_store import InMemoryCardStore
from srs.scheduling.database import SqlCardStore, get_engine


__all__ = [
    # Core algorithm
    "ReviewResult",
    "advance_card",
    "apply_review",
    "coerce_rating",
    "review_card",
    "validate_card",

    # Card record
    "Card",
    "CardId",
    "as_utc",
    "new_card",
    "utc_now",

    # Ladder
    "DEFAULT_LADDER",
    "LADDER_PROFILES",
    "IntervalLadder",
    "get_ladder",

    # Enums
    "CardStage",
    "Rating",

    # Parameters
    "MASTERY_INTERVAL_DAYS",
    "REQUEUE_OFFSET",
    "SHORT_RETRY_MINUTES",
    "WEAK_THRESHOLD",

    # Storage
    "InMemoryCardStore",
    "SqlCardStore",
    "get_engine",
]
