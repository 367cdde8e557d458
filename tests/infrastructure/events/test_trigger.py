"""Tests for TriggerLoop."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from crossrelay.config import TriggerConfig
from crossrelay.infrastructure.events import TriggerLoop


@pytest.fixture
def handler() -> Mock:
    """Create a mock scheduled event handler."""
    mock = Mock()
    mock.handle_scheduled_event = AsyncMock(return_value=True)
    return mock


async def run_for(loop: TriggerLoop, seconds: float) -> None:
    """Run the loop for a while, then stop it."""
    task = asyncio.create_task(loop.start())
    await asyncio.sleep(seconds)
    await loop.stop()
    await task


class TestTriggerLoop:
    """TriggerLoop tests."""

    async def test_is_running_initially_false(self, handler: Mock) -> None:
        """Test that the loop is stopped before start."""
        loop = TriggerLoop(handler, [])

        assert not loop.is_running

    async def test_start_and_stop(self, handler: Mock) -> None:
        """Test that start and stop toggle is_running."""
        loop = TriggerLoop(handler, [TriggerConfig("0 */6 * * *", 60)])
        task = asyncio.create_task(loop.start())
        await asyncio.sleep(0.05)

        assert loop.is_running

        await loop.stop()
        await task

        assert not loop.is_running

    async def test_fires_immediately_without_delay(self, handler: Mock) -> None:
        """Test that a trigger without delay fires once at start."""
        loop = TriggerLoop(handler, [TriggerConfig("0 */6 * * *", 60)])

        await run_for(loop, 0.3)

        handler.handle_scheduled_event.assert_awaited_once()
        event = handler.handle_scheduled_event.await_args.args[0]
        assert event.cron == "0 */6 * * *"

    async def test_fires_repeatedly(self, handler: Mock) -> None:
        """Test that a trigger fires every interval."""
        loop = TriggerLoop(handler, [TriggerConfig("* * * * *", 0.05)])

        await run_for(loop, 0.3)

        assert handler.handle_scheduled_event.await_count >= 3

    async def test_initial_delay(self, handler: Mock) -> None:
        """Test that a delayed trigger does not fire before its delay."""
        loop = TriggerLoop(
            handler,
            [
                TriggerConfig("0 */6 * * *", 60),
                TriggerConfig("0 3/6 * * *", 60, initial_delay_seconds=60),
            ],
        )

        await run_for(loop, 0.3)

        fired = [
            call.args[0].cron for call in handler.handle_scheduled_event.await_args_list
        ]
        assert fired == ["0 */6 * * *"]

    async def test_handler_error_does_not_stop_loop(self, handler: Mock) -> None:
        """Test that a failing handler is logged and the loop continues."""
        handler.handle_scheduled_event.side_effect = RuntimeError("boom")
        loop = TriggerLoop(handler, [TriggerConfig("* * * * *", 0.05)])

        await run_for(loop, 0.2)

        assert handler.handle_scheduled_event.await_count >= 2

    async def test_start_twice_warns(self, handler: Mock) -> None:
        """Test that a second start returns immediately."""
        loop = TriggerLoop(handler, [TriggerConfig("* * * * *", 60)])
        task = asyncio.create_task(loop.start())
        await asyncio.sleep(0.02)

        await asyncio.wait_for(loop.start(), timeout=1)

        await loop.stop()
        await task
