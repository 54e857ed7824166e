"""Session builder modules for the study modes."""

from srs.session_builders.queue_builder import (
    SessionQueueBuilder,
    create_queue,
    select_cards,
)
from srs.session_builders.queue_types import (
    STUDY_MODES,
    SessionQueue,
    StudyMode,
)

__all__ = [
    "SessionQueueBuilder",
    "create_queue",
    "select_cards",
    "STUDY_MODES",
    "SessionQueue",
    "StudyMode",
]
