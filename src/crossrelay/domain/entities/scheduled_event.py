"""Scheduled event entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class ScheduledEvent:
    """A fired schedule.

    Attributes:
        cron: Schedule expression that fired.
        scheduled_time: When the schedule fired.
        type: Event kind.
    """

    cron: str
    scheduled_time: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    type: str = "scheduled"
