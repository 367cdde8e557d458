"""Database management."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Import models to register them with SQLModel metadata
from crossrelay.infrastructure.persistence import models as _models  # noqa: F401

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Database manager.

    Owns the SQLite engine, schema creation and sessions.
    Access is asynchronous through aiosqlite.
    """

    def __init__(self, database_path: str) -> None:
        """Initialize the manager.

        Args:
            database_path: Path to the SQLite database file.
                ":memory:" selects an in-memory database.
        """
        self._database_path = database_path
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def database_path(self) -> str:
        """Configured database path."""
        return self._database_path

    def get_engine(self) -> AsyncEngine:
        """Return the SQLAlchemy async engine.

        The engine is created lazily and cached.
        The database file's parent directory is created if missing.

        Returns:
            The AsyncEngine.
        """
        if self._engine is not None:
            return self._engine

        if self._database_path != ":memory:":
            db_path = Path(self._database_path)
            db_path.parent.mkdir(parents=True, exist_ok=True)
            url = f"sqlite+aiosqlite:///{self._database_path}"
        else:
            url = "sqlite+aiosqlite:///:memory:"

        self._engine = create_async_engine(url)
        self._session_factory = async_sessionmaker(
            self._engine, class_=AsyncSession, expire_on_commit=False
        )
        return self._engine

    async def create_tables(self) -> None:
        """Create the tables.

        Existing tables are left untouched.
        """
        engine = self.get_engine()
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session (async context manager).

        Yields:
            An AsyncSession.
        """
        self.get_engine()  # Ensures _session_factory is initialized
        assert self._session_factory is not None
        async with self._session_factory() as session:
            yield session

    async def is_healthy(self) -> bool:
        """Check that the database answers a trivial query."""
        try:
            async with self.get_engine().connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            logger.exception("Database health check failed")
            return False

    async def close(self) -> None:
        """Dispose the engine and its connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
