"""Goal crossing detection and the celebration effect."""

import asyncio
from dataclasses import dataclass, field

from hydration_tracker.domain.logs import ProgressState
from hydration_tracker.services.notifications import NotificationChannel

DEFAULT_CELEBRATION_SECONDS = 4.0
GOAL_PERCENTAGE = 100


@dataclass
class CrossingDetector:
    """Edge-triggered detector for reaching the daily goal."""

    state: ProgressState = ProgressState.BELOW_GOAL

    def observe(self, percentage: int) -> bool:
        """Record a percentage; return True only on a rise to the goal."""
        if percentage >= GOAL_PERCENTAGE:
            if self.state is ProgressState.GOAL_MET:
                return False
            self.state = ProgressState.GOAL_MET
            return True
        self.state = ProgressState.BELOW_GOAL
        return False


@dataclass
class Celebration:
    """One-shot confetti and toast when the goal is crossed."""

    notifications: NotificationChannel
    duration_seconds: float = DEFAULT_CELEBRATION_SECONDS
    message: str = "Daily goal reached! Great job staying hydrated!"
    detector: CrossingDetector = field(default_factory=CrossingDetector)
    active: bool = False
    fired_count: int = 0
    _timer: asyncio.TimerHandle | None = field(default=None, repr=False)

    @property
    def state(self) -> ProgressState:
        return self.detector.state

    def observe(self, percentage: int) -> bool:
        """Feed the detector and trigger the effect on a crossing."""
        if not self.detector.observe(percentage):
            return False
        self.fired_count += 1
        self.active = True
        self.notifications.notify(self.message)
        if self._timer is not None:
            self._timer.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.duration_seconds, self._clear)
        return True

    def close(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self.active = False

    def _clear(self) -> None:
        self._timer = None
        self.active = False
