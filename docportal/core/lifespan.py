"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, the Database (engine and
session factory) on app.state.database, optional schema creation, engine
disposal. A Database already attached before startup (tests) is reused and
left for its owner to dispose.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from docportal.core.config import get_settings
from docportal.infrastructure.persistence.database import Database
from docportal.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    owned = getattr(app.state, "database", None) is None
    if owned:
        app.state.database = Database(
            settings.database_url,
            echo=settings.database_echo,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )
    if settings.create_schema_on_startup:
        await app.state.database.create_all()
        logger.info("Database schema created")
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    if owned:
        await app.state.database.dispose()
        app.state.database = None
