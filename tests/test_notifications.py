"""Tests for the toast notification channel."""

import asyncio

from hydration_tracker.services.notifications import NotificationChannel


def test_latest_message_wins() -> None:
    async def scenario() -> None:
        channel = NotificationChannel(duration_seconds=60)
        channel.notify("first")
        channel.notify("second")

        assert channel.current == "second"
        channel.close()
        assert channel.current is None

    asyncio.run(scenario())


def test_message_hides_after_duration() -> None:
    async def scenario() -> None:
        channel = NotificationChannel(duration_seconds=0.01)
        channel.notify("saved")
        assert channel.current == "saved"

        await asyncio.sleep(0.05)
        assert channel.current is None

    asyncio.run(scenario())


def test_new_message_restarts_hide_timer() -> None:
    async def scenario() -> None:
        channel = NotificationChannel(duration_seconds=0.2)
        channel.notify("first")
        await asyncio.sleep(0.12)
        channel.notify("second")
        await asyncio.sleep(0.12)

        assert channel.current == "second"
        await asyncio.sleep(0.2)
        assert channel.current is None

    asyncio.run(scenario())
