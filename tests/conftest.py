"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from hydration_tracker.config import Settings
from hydration_tracker.containers import AppContainer
from hydration_tracker.domain.logs import LogEntry
from hydration_tracker.presentation import DashboardOptions
from hydration_tracker.services.celebration import Celebration
from hydration_tracker.services.goals import GoalStore, KeyValueStore
from hydration_tracker.services.hydration import (
    HydrationSessionController,
    ProfileRepository,
    WaterLogRepository,
)
from hydration_tracker.services.messages import ENGLISH
from hydration_tracker.services.notifications import NotificationChannel

FIXED_NOW = datetime(2026, 10, 19, 15, 30, tzinfo=UTC)


@dataclass
class InMemoryWaterLogRepository(WaterLogRepository):
    """In-memory water log repository with failure and delay controls."""

    rows: list[LogEntry] = field(default_factory=list)
    failing_amounts: set[int] = field(default_factory=set)
    fail_list: bool = False
    fail_delete: bool = False
    fail_reset: bool = False
    insert_gates: dict[int, asyncio.Event] = field(default_factory=dict)
    list_gate: asyncio.Event | None = None
    delete_gate: asyncio.Event | None = None
    reset_gate: asyncio.Event | None = None
    deleted_ids: list[str] = field(default_factory=list)
    reset_starts: list[datetime] = field(default_factory=list)

    async def list_since(self, start: datetime) -> list[LogEntry]:
        # rows are read before the gate, like a response delayed in transit
        rows = [row for row in self.rows if row.created_at >= start]
        if self.list_gate is not None:
            await self.list_gate.wait()
        if self.fail_list:
            raise RuntimeError("list failed")
        return sorted(rows, key=lambda row: row.created_at, reverse=True)

    async def insert(self, amount_ml: int) -> LogEntry:
        gate = self.insert_gates.get(amount_ml)
        if gate is not None:
            await gate.wait()
        if amount_ml in self.failing_amounts:
            raise RuntimeError("insert failed")
        entry = LogEntry(id=str(uuid4()), created_at=FIXED_NOW, amount_ml=amount_ml)
        self.rows.append(entry)
        return entry

    async def delete_by_id(self, entry_id: str) -> None:
        if self.delete_gate is not None:
            await self.delete_gate.wait()
        if self.fail_delete:
            raise RuntimeError("delete failed")
        self.deleted_ids.append(entry_id)
        self.rows = [row for row in self.rows if row.id != entry_id]

    async def delete_since(self, start: datetime) -> None:
        if self.reset_gate is not None:
            await self.reset_gate.wait()
        if self.fail_reset:
            raise RuntimeError("reset failed")
        self.reset_starts.append(start)
        self.rows = [row for row in self.rows if row.created_at < start]


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    daily_goal_ml: int | None = None
    fail: bool = False

    async def get_daily_goal(self) -> int | None:
        if self.fail:
            raise RuntimeError("profile read failed")
        return self.daily_goal_ml


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store that records writes."""

    values: dict[str, object] = field(default_factory=dict)
    writes: list[tuple[str, object]] = field(default_factory=list)

    def get(self, key: str) -> object | None:
        return self.values.get(key)

    def set(self, key: str, value: object) -> None:
        self.writes.append((key, value))
        self.values[key] = value


def make_entry(amount_ml: int, created_at: datetime = FIXED_NOW) -> LogEntry:
    return LogEntry(id=str(uuid4()), created_at=created_at, amount_ml=amount_ml)


def make_controller(
    repository: InMemoryWaterLogRepository | None = None,
    store: InMemoryKeyValueStore | None = None,
    profile_repository: InMemoryProfileRepository | None = None,
) -> HydrationSessionController:
    notifications = NotificationChannel(duration_seconds=60)
    return HydrationSessionController(
        repository=repository or InMemoryWaterLogRepository(),
        goal_store=GoalStore(store or InMemoryKeyValueStore()),
        notifications=notifications,
        celebration=Celebration(
            notifications=notifications,
            duration_seconds=60,
            message=ENGLISH.goal_reached,
        ),
        profile_repository=profile_repository,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_key="header.payload.signature",
        goal_store_path=tmp_path / "preferences.json",
    )


@pytest.fixture
def repository() -> InMemoryWaterLogRepository:
    return InMemoryWaterLogRepository()


@pytest.fixture
def container(
    settings: Settings, repository: InMemoryWaterLogRepository
) -> AppContainer:
    controller = make_controller(repository)

    async def close_resources() -> None:
        await controller.aclose()

    return AppContainer(
        settings=settings,
        controller=controller,
        dashboard_options=DashboardOptions(),
        close_resources=close_resources,
    )
