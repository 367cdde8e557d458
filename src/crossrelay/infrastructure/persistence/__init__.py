"""Persistence infrastructure."""

from crossrelay.infrastructure.persistence.database import DatabaseManager
from crossrelay.infrastructure.persistence.exceptions import (
    DatabaseError,
    PersistenceError,
)
from crossrelay.infrastructure.persistence.memory_store import SQLiteMemoryStore
from crossrelay.infrastructure.persistence.models import (
    ConversationTurnModel,
    MemoryEntryModel,
)

__all__ = [
    "ConversationTurnModel",
    "DatabaseError",
    "DatabaseManager",
    "MemoryEntryModel",
    "PersistenceError",
    "SQLiteMemoryStore",
]
