"""
Custom exceptions for the scheduling engine.
"""


class SrsError(Exception):
    """Base exception for all scheduling engine errors."""
    pass


class InvalidCardError(SrsError, ValueError):
    """Raised when a card record is outside the valid domain."""
    pass


class LadderConfigError(SrsError, ValueError):
    """Raised when an interval ladder is malformed."""
    pass


class SessionFinishedError(SrsError):
    """Raised when a review is recorded on a session with an empty queue."""
    pass
