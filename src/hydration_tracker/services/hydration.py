"""Hydration session controller with optimistic synchronization."""

import asyncio
import logging
from collections.abc import Callable, Coroutine, Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from uuid import uuid4
from zoneinfo import ZoneInfo

from hydration_tracker.domain.logs import (
    PROVISIONAL_ID_PREFIX,
    LogEntry,
    ProgressState,
    SessionTotals,
)
from hydration_tracker.services.celebration import Celebration
from hydration_tracker.services.goals import GoalStore, parse_positive_int
from hydration_tracker.services.messages import ENGLISH, MessageCatalog
from hydration_tracker.services.notifications import NotificationChannel
from hydration_tracker.services.session_state import SessionState

logger = logging.getLogger(__name__)


class WaterLogRepository(Protocol):
    """Remote store interface for water logs."""

    async def list_since(self, start: datetime) -> list[LogEntry]:
        """Return entries created at or after start, newest first."""

    async def insert(self, amount_ml: int) -> LogEntry:
        """Insert an entry and return the stored row."""

    async def delete_by_id(self, entry_id: str) -> None:
        """Delete a single entry."""

    async def delete_since(self, start: datetime) -> None:
        """Delete every entry created at or after start."""


class ProfileRepository(Protocol):
    """Remote store interface for the user profile."""

    async def get_daily_goal(self) -> int | None:
        """Return the profile's daily goal, if set."""


@dataclass
class _LoadWindow:
    """Ids confirmed or removed while a store listing is in flight."""

    confirmed: set[str] = field(default_factory=set)
    removed: set[str] = field(default_factory=set)


@dataclass
class HydrationSessionController:
    """Mediates user intents, the remote store and local session state.

    Every mutation is applied to the session state immediately, then
    reconciled with the store result or rolled back when the store call
    fails. Adds are tracked by provisional id in a map of futures that are
    resolved exactly once with the confirmed entry, or None on failure.
    Loads that overlap other operations keep entries confirmed meanwhile and
    drop ids whose delete is in flight, so a stale listing never undoes them.
    """

    repository: WaterLogRepository
    goal_store: GoalStore
    notifications: NotificationChannel
    celebration: Celebration
    messages: MessageCatalog = ENGLISH
    profile_repository: ProfileRepository | None = None
    timezone: str | None = None
    clock: Callable[[], datetime] | None = None
    state: SessionState = field(default_factory=SessionState)
    loading: bool = False
    goal_ml: int = field(init=False)
    _pending: dict[str, asyncio.Future[LogEntry | None]] = field(
        default_factory=dict, init=False, repr=False
    )
    _tasks: set[asyncio.Task[object]] = field(
        default_factory=set, init=False, repr=False
    )
    _load_windows: list[_LoadWindow] = field(
        default_factory=list, init=False, repr=False
    )
    _deleting: set[str] = field(default_factory=set, init=False, repr=False)
    _resets_in_flight: int = field(default=0, init=False, repr=False)
    _loaded_day: datetime | None = field(default=None, init=False, repr=False)
    _goal_set_in_session: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.goal_ml = self.goal_store.get()

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return self.state.entries

    @property
    def totals(self) -> SessionTotals:
        return self.state.totals(self.goal_ml)

    @property
    def progress_state(self) -> ProgressState:
        return self.celebration.state

    def now(self) -> datetime:
        """Return the current time in the configured timezone."""
        if self.clock is not None:
            return self.clock()
        if self.timezone:
            return datetime.now(tz=ZoneInfo(self.timezone))
        return datetime.now().astimezone()

    def today_start(self) -> datetime:
        """Return local midnight for the current day."""
        return self.now().replace(hour=0, minute=0, second=0, microsecond=0)

    def day_changed(self) -> bool:
        """Return True when the last successful load was for an earlier day."""
        return self._loaded_day is not None and self._loaded_day != self.today_start()

    async def load(self) -> None:
        """Replace the session state with today's entries from the store."""
        window = _LoadWindow(removed=set(self._deleting))
        self._load_windows.append(window)
        self.loading = True
        try:
            start = self.today_start()
            try:
                entries = await self.repository.list_since(start)
            except Exception:
                logger.exception("Failed to load today's water logs")
            else:
                self.state.replace_all(self._merge_loaded(entries, window))
                self._loaded_day = start
            await self._adopt_profile_goal()
        finally:
            self._load_windows.remove(window)
            self.loading = bool(self._load_windows)
        self._observe_progress()

    async def add_entry(self, amount: object) -> LogEntry | None:
        """Record a drink optimistically and confirm it with the store."""
        amount_ml = parse_positive_int(amount)
        if amount_ml is None:
            return None
        provisional = LogEntry(
            id=f"{PROVISIONAL_ID_PREFIX}{uuid4().hex}",
            created_at=self.now(),
            amount_ml=amount_ml,
        )
        self._pending[provisional.id] = asyncio.get_running_loop().create_future()
        self.state.prepend(provisional)
        confirmed: LogEntry | None = None
        try:
            confirmed = await self.repository.insert(amount_ml)
        except Exception:
            logger.exception("Failed to save water log", extra={"amount": amount_ml})
            self.state.remove(provisional.id)
            self.notifications.notify(self.messages.add_failed)
        else:
            self._reconcile(provisional.id, confirmed)
            self.notifications.notify(self.messages.added.format(amount=amount_ml))
        finally:
            self._resolve_pending(provisional.id, confirmed)
            self._forget_settled()
        self._observe_progress()
        return confirmed

    async def remove_entry(self, entry_id: str) -> bool:
        """Remove an entry optimistically; reinsert it at the head on failure."""
        removed = self.state.remove(entry_id)
        if removed is None:
            return False
        _, entry = removed
        target: LogEntry | None = entry
        deleting = [entry.id]
        self._mark_deleting(deleting)
        try:
            if entry.is_provisional:
                target = await self._wait_confirmed(entry.id)
                if target is not None:
                    deleting.append(target.id)
                    self._mark_deleting([target.id])
            if target is not None:
                await self.repository.delete_by_id(target.id)
        except Exception:
            logger.exception("Failed to delete water log", extra={"entry_id": entry_id})
            self._unmark_deleting(deleting, restored=True)
            restored = target or entry
            if self.state.find(restored.id) is None:
                self.state.prepend(restored)
            self.notifications.notify(self.messages.remove_failed)
            self._observe_progress()
            return False
        self._unmark_deleting(deleting, restored=False)
        # a failed add already reported its own outcome
        if target is not None:
            self.notifications.notify(
                self.messages.removed.format(amount=entry.amount_ml)
            )
        self._observe_progress()
        return True

    async def reset_day(self) -> bool:
        """Clear today's entries; restore the exact list on failure."""
        snapshot = self.state.clear()
        deleting = [entry.id for entry in snapshot]
        self._mark_deleting(deleting)
        self._resets_in_flight += 1
        try:
            await self.repository.delete_since(self.today_start())
        except Exception:
            logger.exception("Failed to reset today's water logs")
            self._unmark_deleting(deleting, restored=True)
            # entries added while the reset was in flight stay at the head
            added_meanwhile = list(self.state.entries)
            present = {entry.id for entry in added_meanwhile}
            restored = [
                entry for entry in self._settle(snapshot) if entry.id not in present
            ]
            self.state.restore([*added_meanwhile, *restored])
            self.notifications.notify(self.messages.reset_failed)
            return False
        else:
            cleared = self._settle(snapshot)
            self._mark_deleting(entry.id for entry in cleared)
            # a load that finished mid-reset may have listed rows now deleted
            for entry in cleared:
                self.state.remove(entry.id)
            self._unmark_deleting(
                [*deleting, *(entry.id for entry in cleared)], restored=False
            )
            self.notifications.notify(self.messages.reset_done)
            return True
        finally:
            self._resets_in_flight -= 1
            self._forget_settled()
            self._observe_progress()

    async def set_goal(self, value: object) -> int | None:
        """Persist a new daily goal; invalid input is ignored."""
        goal = parse_positive_int(value)
        if goal is None:
            return None
        self.goal_store.set(goal)
        self.goal_ml = goal
        self._goal_set_in_session = True
        self.notifications.notify(self.messages.goal_set.format(goal=goal))
        self._observe_progress()
        return goal

    def submit(
        self, operation: Coroutine[object, object, object]
    ) -> asyncio.Task[object]:
        """Run an operation in the background and keep a reference to it."""
        task = asyncio.get_running_loop().create_task(operation)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_for_pending(self) -> None:
        """Wait until every in-flight operation has settled."""
        while self._tasks or self._unsettled():
            await asyncio.gather(
                *self._tasks, *self._unsettled(), return_exceptions=True
            )

    async def aclose(self) -> None:
        """Drain in-flight operations and release timers."""
        await self.wait_for_pending()
        self.notifications.close()
        self.celebration.close()

    def _merge_loaded(
        self, entries: list[LogEntry], window: _LoadWindow
    ) -> list[LogEntry]:
        """Combine a store listing with changes made while it was in flight."""
        loaded = [entry for entry in entries if entry.id not in window.removed]
        listed = {entry.id for entry in loaded}
        kept = [
            entry
            for entry in self.state.entries
            if (entry.is_provisional or entry.id in window.confirmed)
            and entry.id not in listed
        ]
        return [*kept, *loaded]

    def _mark_deleting(self, entry_ids: Iterable[str]) -> None:
        for entry_id in entry_ids:
            self._deleting.add(entry_id)
            for window in self._load_windows:
                window.removed.add(entry_id)

    def _unmark_deleting(self, entry_ids: Iterable[str], *, restored: bool) -> None:
        for entry_id in entry_ids:
            self._deleting.discard(entry_id)
            if restored:
                for window in self._load_windows:
                    window.removed.discard(entry_id)

    def _reconcile(self, provisional_id: str, confirmed: LogEntry) -> None:
        for window in self._load_windows:
            window.confirmed.add(confirmed.id)
        if self.state.find(confirmed.id) is not None:
            self.state.remove(provisional_id)
            return
        if not self.state.replace(provisional_id, confirmed):
            logger.info(
                "Confirmed water log has no placeholder left",
                extra={"entry_id": confirmed.id, "provisional_id": provisional_id},
            )

    def _resolve_pending(self, provisional_id: str, confirmed: LogEntry | None) -> None:
        future = self._pending.get(provisional_id)
        if future is not None and not future.done():
            future.set_result(confirmed)

    async def _wait_confirmed(self, provisional_id: str) -> LogEntry | None:
        future = self._pending.get(provisional_id)
        if future is None:
            return None
        return await future

    def _settle(self, snapshot: list[LogEntry]) -> list[LogEntry]:
        """Swap provisional entries whose add finished for their outcome."""
        settled: list[LogEntry] = []
        for entry in snapshot:
            future = self._pending.get(entry.id)
            if entry.is_provisional and future is not None and future.done():
                confirmed = future.result()
                if confirmed is not None:
                    settled.append(confirmed)
                continue
            settled.append(entry)
        return settled

    def _unsettled(self) -> list[asyncio.Future[LogEntry | None]]:
        return [future for future in self._pending.values() if not future.done()]

    def _forget_settled(self) -> None:
        # reset snapshots still need the outcome of their provisional entries
        if self._resets_in_flight:
            return
        self._pending = {
            key: future for key, future in self._pending.items() if not future.done()
        }

    async def _adopt_profile_goal(self) -> None:
        if self.profile_repository is None or self._goal_set_in_session:
            return
        if self.goal_store.get_stored() is not None:
            return
        try:
            goal = await self.profile_repository.get_daily_goal()
        except Exception:
            logger.exception("Failed to read profile goal")
            return
        if goal is not None and goal > 0 and not self._goal_set_in_session:
            self.goal_ml = goal

    def _observe_progress(self) -> None:
        self.celebration.observe(self.totals.percentage)
