"""SQLModel table definitions."""

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class ConversationTurnModel(SQLModel, table=True):
    """Conversation history table."""

    __tablename__ = "conversation_turns"

    id: int | None = Field(default=None, primary_key=True)
    conversation_id: str = Field(index=True)
    role: str
    content: str
    timestamp: datetime
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class MemoryEntryModel(SQLModel, table=True):
    """Long-term memory table."""

    __tablename__ = "memory_entries"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(index=True)
    memory_type: str
    content: str
    timestamp: datetime
    ttl: int
    expires_at: datetime = Field(index=True)
