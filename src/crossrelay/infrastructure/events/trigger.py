"""Interval trigger loop for scheduled events."""

import asyncio
import logging
from collections.abc import Sequence
from typing import Protocol

from crossrelay.config import TriggerConfig
from crossrelay.domain.entities import ScheduledEvent

logger = logging.getLogger(__name__)


class ScheduledEventHandler(Protocol):
    """Receives fired schedule events."""

    async def handle_scheduled_event(self, event: ScheduledEvent) -> bool: ...


class TriggerLoop:
    """Fires scheduled events at configured intervals.

    Each trigger fires its expression after ``initial_delay_seconds`` and then
    every ``interval_seconds``. Errors raised by the handler are logged and do
    not stop the loop.
    """

    def __init__(
        self,
        handler: ScheduledEventHandler,
        triggers: Sequence[TriggerConfig],
    ) -> None:
        """Initialize the trigger loop.

        Args:
            handler: Receives each fired event.
            triggers: Triggers to fire.
        """
        self._handler = handler
        self._triggers = tuple(triggers)
        self._stop_event = asyncio.Event()
        self._stop_event.set()  # Initially stopped

    async def start(self) -> None:
        """Run the loop until ``stop`` is called."""
        if not self._stop_event.is_set():
            logger.warning("TriggerLoop already running")
            return

        self._stop_event.clear()
        logger.info("TriggerLoop started with %d trigger(s)", len(self._triggers))

        loop = asyncio.get_running_loop()
        started = loop.time()
        next_fire = [
            started + trigger.initial_delay_seconds for trigger in self._triggers
        ]

        min_interval = min(
            [trigger.interval_seconds for trigger in self._triggers] + [1.0]
        )
        poll_interval = max(min_interval / 10, 0.01)

        while not self._stop_event.is_set():
            try:
                try:
                    await asyncio.wait_for(
                        self._stop_event.wait(),
                        timeout=poll_interval,
                    )
                    break
                except asyncio.TimeoutError:
                    pass

                current = loop.time()
                for index, trigger in enumerate(self._triggers):
                    if current >= next_fire[index]:
                        next_fire[index] = current + trigger.interval_seconds
                        await self._fire(trigger)

            except asyncio.CancelledError:
                break
            except Exception:
                logger.exception("Error in trigger loop")

        logger.info("TriggerLoop stopped")

    async def _fire(self, trigger: TriggerConfig) -> None:
        event = ScheduledEvent(cron=trigger.cron)
        logger.debug("Firing scheduled event: %s", trigger.cron)
        try:
            await self._handler.handle_scheduled_event(event)
        except Exception:
            logger.exception("Scheduled event failed: %s", trigger.cron)

    async def stop(self) -> None:
        """Stop the loop."""
        logger.info("Stopping TriggerLoop")
        self._stop_event.set()

    @property
    def is_running(self) -> bool:
        """Check if the loop is running."""
        return not self._stop_event.is_set()
