"""View models for the dashboard shell."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime  # noqa: TC003
from typing import TYPE_CHECKING

from pydantic import BaseModel

from hydration_tracker.domain.logs import LogEntry, ProgressState
from hydration_tracker.services.messages import catalog_for

if TYPE_CHECKING:
    from hydration_tracker.services.hydration import HydrationSessionController

RING_RADIUS = 120.0


@dataclass(frozen=True)
class DashboardOptions:
    """Feature switches for the single dashboard shell."""

    language: str = "en"
    show_confetti: bool = True
    show_streak_badge: bool = True
    quick_add_amounts: tuple[int, ...] = (250, 500)


class RingGeometry(BaseModel):
    """Circular progress arc for an SVG ring gauge."""

    radius: float
    circumference: float
    dash_offset: float


class EntryView(BaseModel):
    id: str
    amount_ml: int
    created_at: datetime
    time_label: str
    pending: bool


class DashboardView(BaseModel):
    """Everything the dashboard needs to render."""

    entries: list[EntryView]
    total_ml: int
    goal_ml: int
    percentage: int
    display_percentage: int
    ring: RingGeometry
    motivation: str
    empty_message: str | None
    toast: str | None
    celebrating: bool
    show_streak_badge: bool
    progress_state: ProgressState
    loading: bool
    quick_add_amounts: list[int]
    language: str


def ring_geometry(percentage: int, radius: float = RING_RADIUS) -> RingGeometry:
    """Compute the stroke dash offset for a clamped percentage."""
    circumference = 2 * math.pi * radius
    clamped = max(0, min(percentage, 100))
    return RingGeometry(
        radius=radius,
        circumference=circumference,
        dash_offset=circumference * (1 - clamped / 100),
    )


def build_dashboard_view(
    controller: HydrationSessionController, options: DashboardOptions
) -> DashboardView:
    """Render controller state as a view model."""
    catalog = catalog_for(options.language)
    totals = controller.totals
    entries = controller.entries
    goal_met = controller.progress_state is ProgressState.GOAL_MET
    if entries:
        empty_message = None
    elif controller.loading:
        empty_message = catalog.loading
    else:
        empty_message = catalog.empty_history
    return DashboardView(
        entries=[_entry_view(entry) for entry in entries],
        total_ml=totals.total_ml,
        goal_ml=totals.goal_ml,
        percentage=totals.percentage,
        display_percentage=totals.display_percentage,
        ring=ring_geometry(totals.percentage),
        motivation=catalog.motivational(totals.percentage),
        empty_message=empty_message,
        toast=controller.notifications.current,
        celebrating=options.show_confetti and controller.celebration.active,
        show_streak_badge=options.show_streak_badge and goal_met,
        progress_state=controller.progress_state,
        loading=controller.loading,
        quick_add_amounts=list(options.quick_add_amounts),
        language=options.language,
    )


def _entry_view(entry: LogEntry) -> EntryView:
    return EntryView(
        id=entry.id,
        amount_ml=entry.amount_ml,
        created_at=entry.created_at,
        time_label=entry.created_at.strftime("%H:%M"),
        pending=entry.is_provisional,
    )
