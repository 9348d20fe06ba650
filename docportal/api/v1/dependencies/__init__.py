"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories, the response
assembler, application services and the bearer-token gate. Routes depend
only on these, never on infrastructure directly.
"""

from .auth import AuthSecurity, get_auth_gate, get_auth_security, require_user_id
from .db import get_database, get_db, get_db_transactional
from .repositories import (
    get_assembler,
    get_assembler_for_write,
    get_auth_service,
    get_collection_service,
    get_repositories,
    get_repositories_for_write,
    get_user_service,
)

__all__ = [
    "AuthSecurity",
    "get_assembler",
    "get_assembler_for_write",
    "get_auth_gate",
    "get_auth_security",
    "get_auth_service",
    "get_collection_service",
    "get_database",
    "get_db",
    "get_db_transactional",
    "get_repositories",
    "get_repositories_for_write",
    "get_user_service",
    "require_user_id",
]
