"""Tests for dashboard view models."""

import asyncio
import math

import pytest

from hydration_tracker.presentation import (
    DashboardOptions,
    build_dashboard_view,
    ring_geometry,
)
from hydration_tracker.services.messages import ENGLISH, SPANISH, catalog_for
from tests.conftest import InMemoryWaterLogRepository, make_controller, make_entry


def test_ring_geometry_arc_length() -> None:
    half = ring_geometry(50, radius=100)
    assert half.circumference == pytest.approx(2 * math.pi * 100)
    assert half.dash_offset == pytest.approx(math.pi * 100)

    assert ring_geometry(0, radius=10).dash_offset == pytest.approx(2 * math.pi * 10)
    assert ring_geometry(140, radius=10).dash_offset == pytest.approx(0)


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        (0, "Let's start hydrating!"),
        (10, "Good start, keep sipping."),
        (30, "A quarter of the way there!"),
        (60, "Halfway there, keep going!"),
        (90, "Almost there, just a little more!"),
        (130, "Goal reached! You're fully hydrated."),
    ],
)
def test_motivational_copy(percentage: int, expected: str) -> None:
    assert ENGLISH.motivational(percentage) == expected


def test_catalog_falls_back_to_english() -> None:
    assert catalog_for("ES") is SPANISH
    assert catalog_for("fr") is ENGLISH


def test_view_for_empty_day() -> None:
    controller = make_controller()
    view = build_dashboard_view(controller, DashboardOptions())

    assert view.entries == []
    assert view.total_ml == 0
    assert view.goal_ml == 2000
    assert view.empty_message == ENGLISH.empty_history
    assert view.quick_add_amounts == [250, 500]
    assert not view.show_streak_badge


def test_view_shows_loading_copy_while_loading() -> None:
    controller = make_controller()
    controller.loading = True
    view = build_dashboard_view(controller, DashboardOptions(language="es"))

    assert view.empty_message == SPANISH.loading


def test_view_after_goal_met() -> None:
    async def scenario() -> None:
        repository = InMemoryWaterLogRepository(rows=[make_entry(1500)])
        controller = make_controller(repository)
        await controller.load()
        await controller.add_entry(700)

        view = build_dashboard_view(controller, DashboardOptions())
        assert view.total_ml == 2200
        assert view.percentage == 110
        assert view.display_percentage == 100
        assert view.ring.dash_offset == pytest.approx(0)
        assert view.celebrating
        assert view.show_streak_badge
        assert view.toast == ENGLISH.goal_reached
        assert [entry.amount_ml for entry in view.entries] == [700, 1500]
        assert view.entries[0].time_label == "15:30"

        quiet = build_dashboard_view(
            controller, DashboardOptions(show_confetti=False, show_streak_badge=False)
        )
        assert not quiet.celebrating
        assert not quiet.show_streak_badge
        await controller.aclose()

    asyncio.run(scenario())
