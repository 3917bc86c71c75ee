"""Domain models for water intake logs."""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

PROVISIONAL_ID_PREFIX = "temp-"


@dataclass(frozen=True)
class LogEntry:
    """A single timestamped water intake entry."""

    id: str
    created_at: datetime
    amount_ml: int

    @property
    def is_provisional(self) -> bool:
        """Return True while the entry is not yet confirmed by the store."""
        return self.id.startswith(PROVISIONAL_ID_PREFIX)


@dataclass(frozen=True)
class SessionTotals:
    """Derived totals for the current day."""

    total_ml: int
    goal_ml: int

    @property
    def percentage(self) -> int:
        return percentage_of_goal(self.total_ml, self.goal_ml)

    @property
    def display_percentage(self) -> int:
        """Percentage clamped to 100 for visual width only."""
        return min(self.percentage, 100)


class ProgressState(StrEnum):
    """Whether today's total has reached the goal."""

    BELOW_GOAL = "below_goal"
    GOAL_MET = "goal_met"


def percentage_of_goal(total_ml: int, goal_ml: int) -> int:
    """Return the goal percentage rounded half up, unbounded above 100."""
    if goal_ml <= 0:
        return 0
    return math.floor(total_ml / goal_ml * 100 + 0.5)
