"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_DAILY_GOAL_ML = 2000


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_key: str
    logs_table: str = "water_logs"
    profiles_table: str = "profiles"
    goal_store_path: Path = Path(".hydration/preferences.json")
    default_daily_goal_ml: int = DEFAULT_DAILY_GOAL_ML
    timezone: str | None = None
    toast_seconds: float = 2.6
    celebration_seconds: float = 4.0
    dashboard_language: str = "en"
    show_confetti: bool = True
    show_streak_badge: bool = True
    quick_add_amounts: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_quick_add_amounts(raw: str | None) -> tuple[int, ...]:
    """Parse comma separated quick-add button amounts from env."""
    if raw is None:
        return (250, 500)
    amounts: list[int] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value.isdigit() and int(value) > 0:
            amounts.append(int(value))
    return tuple(amounts) or (250, 500)
