"""Domain entities."""

from crossrelay.domain.entities.action_result import ActionResult
from crossrelay.domain.entities.conversation import ConversationTurn, Role
from crossrelay.domain.entities.memory import (
    MemoryEntry,
    MemoryType,
    create_memory_entry,
)
from crossrelay.domain.entities.message import Author, Message, Platform
from crossrelay.domain.entities.scheduled_event import ScheduledEvent

__all__ = [
    "ActionResult",
    "Author",
    "ConversationTurn",
    "MemoryEntry",
    "MemoryType",
    "Message",
    "Platform",
    "Role",
    "ScheduledEvent",
    "create_memory_entry",
]
