"""Supabase repository for water logs."""

import asyncio
from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from hydration_tracker.domain.logs import LogEntry
from hydration_tracker.services.hydration import WaterLogRepository


@dataclass
class SupabaseWaterLogRepository(WaterLogRepository):
    """Supabase implementation for water logs.

    The Supabase client is synchronous, so each call runs in a worker
    thread to keep the event loop free for other operations.
    """

    client: Client
    table: str = "water_logs"

    async def list_since(self, start: datetime) -> list[LogEntry]:
        """Return entries created at or after start, newest first."""
        return await asyncio.to_thread(self._list_since, start)

    async def insert(self, amount_ml: int) -> LogEntry:
        """Insert an entry and return the stored row."""
        return await asyncio.to_thread(self._insert, amount_ml)

    async def delete_by_id(self, entry_id: str) -> None:
        """Delete a single entry."""
        await asyncio.to_thread(self._delete_by_id, entry_id)

    async def delete_since(self, start: datetime) -> None:
        """Delete every entry created at or after start."""
        await asyncio.to_thread(self._delete_since, start)

    def _list_since(self, start: datetime) -> list[LogEntry]:
        response = (
            self.client.table(self.table)
            .select("id, created_at, amount_ml")
            .gte("created_at", start.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def _insert(self, amount_ml: int) -> LogEntry:
        response = (
            self.client.table(self.table).insert([{"amount_ml": amount_ml}]).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create water log")
        return _parse_row(response.data[0])

    def _delete_by_id(self, entry_id: str) -> None:
        self.client.table(self.table).delete().eq("id", entry_id).execute()

    def _delete_since(self, start: datetime) -> None:
        self.client.table(self.table).delete().gte(
            "created_at", start.isoformat()
        ).execute()


def _parse_row(row: dict[str, object]) -> LogEntry:
    return LogEntry(
        id=str(row["id"]),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        amount_ml=int(row.get("amount_ml", 0)),
    )
