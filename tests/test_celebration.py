"""Tests for goal crossing detection."""

import asyncio

from hydration_tracker.domain.logs import ProgressState
from hydration_tracker.services.celebration import Celebration, CrossingDetector
from hydration_tracker.services.notifications import NotificationChannel


def test_detector_fires_once_per_crossing() -> None:
    detector = CrossingDetector()
    fired = [detector.observe(value) for value in (80, 95, 102, 110)]

    assert fired == [False, False, True, False]
    assert detector.state is ProgressState.GOAL_MET


def test_detector_rearms_after_drop() -> None:
    detector = CrossingDetector()
    fired = [detector.observe(value) for value in (100, 120, 90, 99, 101, 130)]

    assert fired == [True, False, False, False, True, False]


def test_celebration_shows_effect_and_clears() -> None:
    async def scenario() -> None:
        notifications = NotificationChannel(duration_seconds=60)
        celebration = Celebration(
            notifications=notifications, duration_seconds=0.01, message="Goal!"
        )

        assert celebration.observe(104)
        assert celebration.active
        assert notifications.current == "Goal!"
        assert not celebration.observe(108)

        await asyncio.sleep(0.05)
        assert not celebration.active
        assert celebration.fired_count == 1
        notifications.close()

    asyncio.run(scenario())


def test_drop_below_goal_is_silent() -> None:
    async def scenario() -> None:
        notifications = NotificationChannel(duration_seconds=60)
        celebration = Celebration(notifications=notifications, duration_seconds=60)
        celebration.observe(100)
        notifications.close()

        assert not celebration.observe(50)
        assert celebration.state is ProgressState.BELOW_GOAL
        assert notifications.current is None
        celebration.close()

    asyncio.run(scenario())
