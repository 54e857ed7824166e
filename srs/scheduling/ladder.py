"""
Interval Ladder - Day intervals by learning step

The ladder is pure configuration: a fixed ascending sequence of day counts
indexed by learning step, plus the mastery sentinel. The scheduler consults
it for every interval it hands out.

Profiles:
- standard: (0, 2, 5, 10, 20), fail demotes one step
- classic:  (0, 1, 3, 12, 30), fail resets to step 1 with interval 0
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from srs.exceptions import LadderConfigError
from srs.scheduling.constants import (
    CardStage,
    CLASSIC_LADDER,
    MASTERY_INTERVAL_DAYS,
    STANDARD_LADDER,
)


@dataclass(frozen=True)
class IntervalLadder:
    """
    Interval progression and mastery cutoff for the review scheduler.

    rungs[0] must be 0 (New cards have no interval) and the remaining rungs
    strictly increasing. A card that passes past the last rung is Mastered.
    """
    rungs: Tuple[int, ...] = STANDARD_LADDER
    mastery_interval: int = MASTERY_INTERVAL_DAYS
    reset_on_fail: bool = False
    name: str = "standard"

    def __post_init__(self):
        rungs = tuple(self.rungs)
        object.__setattr__(self, "rungs", rungs)

        # One rung per non-mastered stage keeps the 6-level state encoding
        if len(rungs) != int(CardStage.MASTERED):
            raise LadderConfigError(
                f"Ladder needs exactly {int(CardStage.MASTERED)} rungs, got {rungs}"
            )
        if any(not isinstance(r, int) or isinstance(r, bool) for r in rungs):
            raise LadderConfigError(f"Ladder rungs must be integer days, got {rungs}")
        if rungs[0] != 0:
            raise LadderConfigError(f"First rung must be 0, got {rungs[0]}")
        for lower, upper in zip(rungs[1:], rungs[2:]):
            if lower >= upper:
                raise LadderConfigError(f"Ladder rungs must be strictly increasing, got {rungs}")
        if rungs[1] <= 0:
            raise LadderConfigError(f"Step 1 interval must be positive, got {rungs[1]}")
        if self.mastery_interval <= rungs[-1]:
            raise LadderConfigError(
                f"Mastery interval {self.mastery_interval} must exceed last rung {rungs[-1]}"
            )

    def interval_for_step(self, step: int) -> int:
        """
        Interval in days for a learning step.

        Out-of-range steps saturate at the first/last rung.
        """
        index = max(0, min(step, len(self.rungs) - 1))
        return self.rungs[index]

    def mastery_interval_sentinel(self) -> int:
        """Interval that means "do not schedule again"."""
        return self.mastery_interval

    def max_step(self) -> int:
        """Step index at which a card becomes Mastered."""
        return len(self.rungs)


LADDER_PROFILES = {
    "standard": IntervalLadder(rungs=STANDARD_LADDER, name="standard"),
    "classic": IntervalLadder(rungs=CLASSIC_LADDER, reset_on_fail=True, name="classic"),
}

DEFAULT_LADDER = LADDER_PROFILES["standard"]


def get_ladder(profile: str) -> IntervalLadder:
    """
    Look up a ladder profile by name.

    Raises:
        LadderConfigError: if the profile is unknown
    """
    try:
        return LADDER_PROFILES[profile.lower()]
    except KeyError:
        known = ", ".join(sorted(LADDER_PROFILES))
        raise LadderConfigError(f"Unknown ladder profile '{profile}' (known: {known})") from None
