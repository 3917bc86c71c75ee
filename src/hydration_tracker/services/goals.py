"""Daily goal persistence."""

import logging
from dataclasses import dataclass
from typing import Protocol

from hydration_tracker.config import DEFAULT_DAILY_GOAL_ML

GOAL_KEY = "daily_goal_ml"

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Process-local persisted key-value storage."""

    def get(self, key: str) -> object | None:
        """Return the stored value for a key, if present."""

    def set(self, key: str, value: object) -> None:
        """Persist a value under a key."""


@dataclass
class GoalStore:
    """Stores the daily goal under a fixed key."""

    store: KeyValueStore
    default_ml: int = DEFAULT_DAILY_GOAL_ML
    key: str = GOAL_KEY

    def get(self) -> int:
        """Return the stored goal or the default."""
        stored = self.get_stored()
        return stored if stored is not None else self.default_ml

    def get_stored(self) -> int | None:
        """Return the stored goal, or None when absent or unparseable."""
        return parse_positive_int(self.store.get(self.key))

    def set(self, value: int) -> None:
        """Persist the goal; write failures are logged and ignored."""
        try:
            self.store.set(self.key, value)
        except OSError:
            logger.exception("Failed to persist daily goal", extra={"goal": value})


def parse_positive_int(value: object) -> int | None:
    """Parse user input as a positive integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float):
        if value.is_integer() and value > 0:
            return int(value)
        return None
    if isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return None
        return parsed if parsed > 0 else None
    return None
