"""
Session pass/fail tally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from srs.scheduling.constants import Rating
from srs.scheduling.scheduler import coerce_rating


@dataclass(frozen=True)
class SummarySnapshot:
    """Final counts for a session."""
    pass_count: int
    fail_count: int
    total: int

    @property
    def accuracy(self) -> Optional[float]:
        if self.total == 0:
            return None
        return self.pass_count / self.total


@dataclass
class SessionSummary:
    """Running pass/fail counts for one session."""
    pass_count: int = 0
    fail_count: int = 0

    @property
    def total(self) -> int:
        return self.pass_count + self.fail_count

    def record(self, rating: Union[Rating, str]) -> None:
        if coerce_rating(rating) is Rating.PASS:
            self.pass_count += 1
        else:
            self.fail_count += 1

    def snapshot(self) -> SummarySnapshot:
        return SummarySnapshot(
            pass_count=self.pass_count,
            fail_count=self.fail_count,
            total=self.total,
        )
