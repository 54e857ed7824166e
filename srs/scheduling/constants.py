"""
Scheduling Constants and Parameters

All configurable parameters for the ladder scheduler in one place.
"""

from enum import Enum, IntEnum


# ---- Ratings ----

class Rating(str, Enum):
    """User feedback on a review. Only two outcomes exist."""
    PASS = "pass"
    FAIL = "fail"


# ---- Card Stages ----

class CardStage(IntEnum):
    """Ordinal learning stage stored in Card.state."""
    NEW = 0
    LEARNING_1 = 1
    LEARNING_2 = 2
    LEARNING_3 = 3
    LEARNING_4 = 4
    MASTERED = 5


# ---- Interval Ladders (days) ----
# Index = learning step. Step 0 (New) has no interval.

STANDARD_LADDER = (0, 2, 5, 10, 20)
CLASSIC_LADDER = (0, 1, 3, 12, 30)

MASTERY_INTERVAL_DAYS = 36500  # ~100 years, "do not schedule again"


# ---- Session Policy ----

SHORT_RETRY_MINUTES = 10   # Fallback due after a fail
REQUEUE_OFFSET = 3         # Failed card comes back after this many others
WEAK_THRESHOLD = 3         # state < this counts as weak
SESSION_SIZE = 20          # Default cram size
