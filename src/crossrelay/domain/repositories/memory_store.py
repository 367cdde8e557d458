"""Memory store protocol."""

from collections.abc import Sequence
from typing import Protocol

from crossrelay.domain.entities import ConversationTurn, MemoryEntry, MemoryType


class MemoryStore(Protocol):
    """Conversation history and long-term memory store.

    History is an append-only log per conversation id. Long-term memory is a
    set of TTL-bearing entries per username.
    """

    async def append_turn(self, conversation_id: str, turn: ConversationTurn) -> None:
        """Append a turn to a conversation.

        Args:
            conversation_id: Conversation partition key.
            turn: Turn to append.
        """
        ...

    async def get_turns(
        self,
        conversation_id: str,
        limit: int | None = None,
    ) -> list[ConversationTurn]:
        """Get conversation turns.

        Args:
            conversation_id: Conversation partition key.
            limit: Number of most recent turns to return. None returns all.

        Returns:
            Turns in chronological order (oldest first).
        """
        ...

    async def get_long_term(self, username: str) -> list[MemoryEntry]:
        """Get all live memory entries for a user.

        Args:
            username: Memory partition key.

        Returns:
            Unexpired entries in chronological order.
        """
        ...

    async def remember(
        self,
        username: str,
        content: str,
        memory_type: MemoryType = MemoryType.LONG_TERM,
        ttl: int | None = None,
    ) -> MemoryEntry:
        """Store a memory entry for a user.

        Args:
            username: Memory partition key.
            content: Remembered text.
            memory_type: Kind of memory.
            ttl: Lifetime in seconds. None uses the store default.

        Returns:
            The stored entry.
        """
        ...

    def format_for_context(self, entries: Sequence[MemoryEntry]) -> str:
        """Render entries as one narrative block for the model.

        Args:
            entries: Memory entries.

        Returns:
            Narrative text, empty when there are no entries.
        """
        ...
