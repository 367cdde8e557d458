"""Conversation turn entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Role(str, Enum):
    """Speaker of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ConversationTurn:
    """One stored exchange unit of a conversation.

    Attributes:
        role: Who produced the content.
        content: Turn text.
        timestamp: When the turn was recorded.
    """

    role: Role
    content: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
