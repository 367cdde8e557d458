"""SQLite implementation of MemoryStore."""

import logging
from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from datetime import datetime, timezone

from jinja2 import Environment, PackageLoader, select_autoescape
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from crossrelay.domain.entities import (
    ConversationTurn,
    MemoryEntry,
    MemoryType,
    Role,
    create_memory_entry,
)
from crossrelay.infrastructure.persistence.exceptions import DatabaseError
from crossrelay.infrastructure.persistence.models import (
    ConversationTurnModel,
    MemoryEntryModel,
)

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60 * 24 * 30
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class SQLiteMemoryStore:
    """SQLite-backed memory store.

    Conversation turns are an append-only log keyed by conversation id.
    Long-term entries are keyed by username and filtered by TTL on read.
    No compaction or eviction happens here.
    """

    def __init__(
        self,
        session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]],
        default_ttl: int = DEFAULT_TTL_SECONDS,
    ) -> None:
        """Initialize the store.

        Args:
            session_factory: Async session factory.
            default_ttl: TTL in seconds for entries stored without one.
        """
        self._session_factory = session_factory
        self._default_ttl = default_ttl
        self._template = _template_env().get_template("long_term_memory.j2")

    async def append_turn(self, conversation_id: str, turn: ConversationTurn) -> None:
        """Append a conversation turn.

        Args:
            conversation_id: Conversation id.
            turn: Turn to append.

        Raises:
            DatabaseError: If the write fails.
        """
        model = ConversationTurnModel(
            conversation_id=conversation_id,
            role=turn.role.value,
            content=turn.content,
            timestamp=turn.timestamp,
        )
        try:
            async with self._session_factory() as session:
                session.add(model)
                await session.commit()
        except SQLAlchemyError as e:
            raise DatabaseError("write", conversation_id) from e

    async def get_turns(
        self,
        conversation_id: str,
        limit: int | None = None,
    ) -> list[ConversationTurn]:
        """Fetch conversation turns.

        Args:
            conversation_id: Conversation id.
            limit: Number of most recent turns to return (None for all).

        Returns:
            Turns, oldest first.

        Raises:
            DatabaseError: If the read fails.
        """
        stmt = select(ConversationTurnModel).where(
            ConversationTurnModel.conversation_id == conversation_id
        )
        if limit is not None:
            stmt = stmt.order_by(col(ConversationTurnModel.id).desc()).limit(limit)
        else:
            stmt = stmt.order_by(col(ConversationTurnModel.id))

        try:
            async with self._session_factory() as session:
                result = await session.exec(stmt)
                models = list(result.all())
        except SQLAlchemyError as e:
            raise DatabaseError("read", conversation_id) from e

        if limit is not None:
            models.reverse()
        return [self._to_turn(m) for m in models]

    async def get_long_term(self, username: str) -> list[MemoryEntry]:
        """Fetch every unexpired memory for a user.

        Args:
            username: Username.

        Returns:
            Unexpired entries, oldest first.

        Raises:
            DatabaseError: If the read fails.
        """
        stmt = (
            select(MemoryEntryModel)
            .where(MemoryEntryModel.username == username)
            .order_by(col(MemoryEntryModel.timestamp), col(MemoryEntryModel.id))
        )
        try:
            async with self._session_factory() as session:
                result = await session.exec(stmt)
                models = result.all()
        except SQLAlchemyError as e:
            raise DatabaseError("read", username) from e

        now = datetime.now(timezone.utc)
        entries = [self._to_entry(m) for m in models]
        return [entry for entry in entries if not entry.is_expired(now)]

    async def remember(
        self,
        username: str,
        content: str,
        memory_type: MemoryType = MemoryType.LONG_TERM,
        ttl: int | None = None,
    ) -> MemoryEntry:
        """Store a memory entry.

        Args:
            username: Username.
            content: Memory content.
            memory_type: Memory type.
            ttl: Time to live in seconds. None uses the default.

        Returns:
            The stored entry.

        Raises:
            DatabaseError: If the write fails.
        """
        entry = create_memory_entry(
            content=content,
            ttl=ttl if ttl is not None else self._default_ttl,
            memory_type=memory_type,
        )
        model = MemoryEntryModel(
            username=username,
            memory_type=entry.type.value,
            content=entry.content,
            timestamp=entry.timestamp,
            ttl=entry.ttl,
            expires_at=entry.expires_at,
        )
        try:
            async with self._session_factory() as session:
                session.add(model)
                await session.commit()
        except SQLAlchemyError as e:
            raise DatabaseError("write", username) from e

        logger.debug("Stored %s memory for %s", entry.type.value, username)
        return entry

    def format_for_context(self, entries: Sequence[MemoryEntry]) -> str:
        """Render entries as prompt context text.

        Args:
            entries: Entries to render.

        Returns:
            Rendered text, or an empty string when there are no entries.
        """
        return self._template.render(entries=entries).strip()

    def _to_turn(self, model: ConversationTurnModel) -> ConversationTurn:
        """Convert a ConversationTurnModel to a ConversationTurn."""
        return ConversationTurn(
            role=Role(model.role),
            content=model.content,
            timestamp=_as_utc(model.timestamp),
        )

    def _to_entry(self, model: MemoryEntryModel) -> MemoryEntry:
        """Convert a MemoryEntryModel to a MemoryEntry."""
        return MemoryEntry(
            type=MemoryType(model.memory_type),
            content=model.content,
            timestamp=_as_utc(model.timestamp),
            ttl=model.ttl,
        )


def _template_env() -> Environment:
    """Environment for the long-term memory block, with a timestamp filter."""
    env = Environment(
        loader=PackageLoader("crossrelay.infrastructure.persistence", "templates"),
        autoescape=select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["format_timestamp"] = lambda ts: ts.strftime(TIMESTAMP_FORMAT)
    return env

def _as_utc(dt: datetime) -> datetime:
    """SQLite drops tzinfo; stored values are UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
