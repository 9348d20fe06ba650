"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

A Database owns one engine and its session factory. It is created at startup
(see docportal.core.lifespan), stored on app.state, and handed to request
dependencies explicitly; nothing here is a module-level global.

Schema migrations are out of scope; Database.create_all() builds the tables
from the ORM metadata for development and tests.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLite ignores FOREIGN KEY / ON DELETE clauses unless enabled per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Engine plus session factory. One instance per process.

    Args:
        url: SQLAlchemy async URL (postgresql+asyncpg://..., sqlite+aiosqlite://...).
        echo: Log SQL statements.
        pool_size: Connection pool size (ignored for SQLite).
        max_overflow: Pool overflow (ignored for SQLite).
        **engine_kwargs: Passed through to create_async_engine (e.g. poolclass in tests).
    """

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        pool_size: int | None = None,
        max_overflow: int | None = None,
        **engine_kwargs: Any,
    ) -> None:
        kwargs: dict[str, Any] = {"echo": echo, **engine_kwargs}
        is_sqlite = url.startswith("sqlite")
        if not is_sqlite:
            kwargs.setdefault("pool_pre_ping", True)
            kwargs.setdefault("pool_recycle", 3600)
            if pool_size is not None:
                kwargs["pool_size"] = pool_size
            if max_overflow is not None:
                kwargs["max_overflow"] = max_overflow
        self.engine: AsyncEngine = create_async_engine(url, **kwargs)
        if is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session without an explicit transaction (reads). Closed on exit."""
        async with self.session_factory() as session:
            yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Yield a session inside a transaction: commit on success, roll back on exception."""
        async with self.session_factory() as session:
            async with session.begin():
                yield session

    async def create_all(self) -> None:
        """Create every table known to Base.metadata (idempotent)."""
        # Import models so their tables are registered on Base.metadata.
        from docportal.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("Database engine disposed")
