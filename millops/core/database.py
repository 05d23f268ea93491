"""
DatabaseManager — Async connection management for the event store.

Key design decisions:
- NullPool: each request opens/closes its own connection, so the
  hosted store never sees idle pooled connections from this service.
- Lazy engine: created on first use, not at import time.
- Read-only usage: the analytics pipeline never writes, but sessions
  still roll back on error so a failed query leaves nothing open.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from millops.core.config import settings


# ── Declarative base for the event store ─────────────────────────
EventsBase = declarative_base()

# Common engine kwargs for every connection
_ENGINE_KWARGS = {
    "poolclass": NullPool,
    "connect_args": {"charset": "utf8mb4"},
}


class DatabaseManager:
    """
    Centralised database connection manager.

    Responsibilities:
    - Event store engine (async, for FastAPI).
    - Context-managed sessions with rollback on error.
    """

    def __init__(self, url: Optional[str] = None) -> None:
        self._url = url
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = create_async_engine(
                self._url or settings.events_db_url,
                echo=settings.DEBUG,
                **_ENGINE_KWARGS,
            )
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker:
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return self._session_factory

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Async session for the event store."""
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def close(self) -> None:
        """Dispose of the engine on shutdown."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None


# ── Global singleton ─────────────────────────────────────────────
db_manager = DatabaseManager()
