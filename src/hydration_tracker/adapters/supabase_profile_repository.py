"""Supabase repository for the profile record."""

import asyncio
from dataclasses import dataclass

from supabase import Client

from hydration_tracker.services.hydration import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Reads the optional daily goal mirrored on the profile row."""

    client: Client
    table: str = "profiles"

    async def get_daily_goal(self) -> int | None:
        """Return the profile's daily goal, if set."""
        return await asyncio.to_thread(self._get_daily_goal)

    def _get_daily_goal(self) -> int | None:
        response = (
            self.client.table(self.table).select("daily_goal_ml").limit(1).execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("daily_goal_ml")
        return int(value) if isinstance(value, int | float) else None
