"""Repository, assembler and service dependencies (composition root).

Read dependencies share the plain session from get_db; write dependencies
share the transactional session from get_db_transactional. FastAPI caches a
dependency per request, so a handler that writes and then assembles the
response sees its own uncommitted changes on one session.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from docportal.application.services import (
    AuthService,
    CollectionService,
    ResponseAssembler,
    UserService,
)
from docportal.core.config import get_settings
from docportal.infrastructure.persistence.repositories import Repositories

from .auth import AuthSecurity, get_auth_security
from .db import get_db, get_db_transactional


def _assembler(repos: Repositories) -> ResponseAssembler:
    return ResponseAssembler(
        firms=repos.firms,
        users=repos.users,
        clients=repos.clients,
        collections=repos.collections,
        requests=repos.requests,
        files=repos.files,
    )


async def get_repositories(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Repositories:
    """Repositories for read operations."""
    return Repositories.for_session(db)


async def get_repositories_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> Repositories:
    """Repositories for create/update/delete (transactional)."""
    return Repositories.for_session(db)


async def get_assembler(
    repos: Annotated[Repositories, Depends(get_repositories)],
) -> ResponseAssembler:
    """Response assembler for read endpoints."""
    return _assembler(repos)


async def get_assembler_for_write(
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
) -> ResponseAssembler:
    """Response assembler on the write transaction (same session as the write)."""
    return _assembler(repos)


async def get_user_service(
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
    security: Annotated[AuthSecurity, Depends(get_auth_security)],
) -> UserService:
    """User service for register, create and update (transactional)."""
    return UserService(user_repo=repos.users, hasher=security)


async def get_auth_service(
    repos: Annotated[Repositories, Depends(get_repositories)],
    security: Annotated[AuthSecurity, Depends(get_auth_security)],
) -> AuthService:
    """Login service (read-only session)."""
    return AuthService(user_repo=repos.users, security=security)


async def get_collection_service(
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
) -> CollectionService:
    """Collection service; access-token lifetime comes from settings."""
    ttl = timedelta(hours=get_settings().collection_access_ttl_hours)
    return CollectionService(collection_repo=repos.collections, access_ttl=ttl)
