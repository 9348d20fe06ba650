"""DB session dependencies (composition root).

The Database is created in the app lifespan and stored on app.state.database;
each request gets its own session from it.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from docportal.domain.exceptions import DatabaseNotConfiguredException
from docportal.infrastructure.persistence.database import Database

logger = logging.getLogger(__name__)


def get_database(request: Request) -> Database:
    """Return the Database attached to the app, or raise 503 if startup did not attach one."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        logger.error("Database not configured: app.state.database is unset")
        raise DatabaseNotConfiguredException()
    return database


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncIterator[AsyncSession]:
    """Database session dependency for read operations.

    Does not commit; use get_db_transactional for writes.
    Yields a session and closes it on exit.
    """
    async with database.session() as session:
        yield session


async def get_db_transactional(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncIterator[AsyncSession]:
    """Database session dependency for write operations.

    Begins a transaction, commits on success, rolls back on exception.
    Use for POST, PATCH, DELETE endpoints.
    """
    async with database.transaction() as session:
        yield session
