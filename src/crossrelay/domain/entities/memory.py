"""Long-term memory entity."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum


class MemoryType(Enum):
    """Memory type."""

    CONVERSATION = "conversation"
    LONG_TERM = "long_term"


@dataclass(frozen=True)
class MemoryEntry:
    """A fact or observation remembered about a user.

    Attributes:
        type: Kind of memory.
        content: Remembered text.
        timestamp: When the entry was created.
        ttl: Lifetime in seconds.
    """

    type: MemoryType
    content: str
    timestamp: datetime
    ttl: int

    def __post_init__(self) -> None:
        if self.ttl <= 0:
            raise ValueError(f"ttl must be positive: {self.ttl}")

    @property
    def expires_at(self) -> datetime:
        """Time after which the entry is no longer returned."""
        return self.timestamp + timedelta(seconds=self.ttl)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the entry has outlived its TTL.

        Args:
            now: Reference time. Defaults to the current UTC time.

        Returns:
            True if the entry is expired.
        """
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at


def create_memory_entry(
    content: str,
    ttl: int,
    memory_type: MemoryType = MemoryType.LONG_TERM,
) -> MemoryEntry:
    """Create a MemoryEntry.

    Args:
        content: Memory content.
        ttl: Time to live in seconds.
        memory_type: Memory type.

    Returns:
        The new entry.
    """
    return MemoryEntry(
        type=memory_type,
        content=content,
        timestamp=datetime.now(timezone.utc),
        ttl=ttl,
    )
