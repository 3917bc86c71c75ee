"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from hydration_tracker.adapters.json_preferences_store import JsonFileKeyValueStore
from hydration_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from hydration_tracker.adapters.supabase_water_log_repository import (
    SupabaseWaterLogRepository,
)
from hydration_tracker.config import Settings, parse_quick_add_amounts
from hydration_tracker.presentation import DashboardOptions
from hydration_tracker.services.celebration import Celebration
from hydration_tracker.services.goals import GoalStore
from hydration_tracker.services.hydration import HydrationSessionController
from hydration_tracker.services.messages import catalog_for
from hydration_tracker.services.notifications import NotificationChannel


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    controller: HydrationSessionController
    dashboard_options: DashboardOptions
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    messages = catalog_for(resolved_settings.dashboard_language)
    notifications = NotificationChannel(
        duration_seconds=resolved_settings.toast_seconds
    )
    celebration = Celebration(
        notifications=notifications,
        duration_seconds=resolved_settings.celebration_seconds,
        message=messages.goal_reached,
    )
    goal_store = GoalStore(
        store=JsonFileKeyValueStore(resolved_settings.goal_store_path),
        default_ml=resolved_settings.default_daily_goal_ml,
    )
    controller = HydrationSessionController(
        repository=SupabaseWaterLogRepository(
            supabase_client, table=resolved_settings.logs_table
        ),
        goal_store=goal_store,
        notifications=notifications,
        celebration=celebration,
        messages=messages,
        profile_repository=SupabaseProfileRepository(
            supabase_client, table=resolved_settings.profiles_table
        ),
        timezone=resolved_settings.timezone,
    )
    dashboard_options = DashboardOptions(
        language=resolved_settings.dashboard_language,
        show_confetti=resolved_settings.show_confetti,
        show_streak_badge=resolved_settings.show_streak_badge,
        quick_add_amounts=parse_quick_add_amounts(
            resolved_settings.quick_add_amounts
        ),
    )

    async def close_resources() -> None:
        await controller.aclose()

    return AppContainer(
        settings=resolved_settings,
        controller=controller,
        dashboard_options=dashboard_options,
        close_resources=close_resources,
    )
