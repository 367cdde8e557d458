"""Event triggering."""

from crossrelay.infrastructure.events.trigger import ScheduledEventHandler, TriggerLoop

__all__ = [
    "ScheduledEventHandler",
    "TriggerLoop",
]
