"""Single-slot toast notifications."""

import asyncio
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_TOAST_SECONDS = 2.6


@dataclass
class NotificationChannel:
    """Shows one transient message at a time.

    A new message supersedes the current one and restarts the hide timer;
    nothing is queued.
    """

    duration_seconds: float = DEFAULT_TOAST_SECONDS
    message: str | None = None
    visible: bool = False
    _timer: asyncio.TimerHandle | None = field(default=None, repr=False)

    @property
    def current(self) -> str | None:
        """Return the visible message, if any."""
        return self.message if self.visible else None

    def notify(self, message: str) -> None:
        """Replace the displayed message and schedule it to hide."""
        self._cancel_timer()
        self.message = message
        self.visible = True
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.duration_seconds, self._hide)
        logger.debug("Notification shown: %s", message)

    def close(self) -> None:
        """Release the pending timer."""
        self._cancel_timer()
        self.visible = False

    def _hide(self) -> None:
        self._timer = None
        self.visible = False

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
