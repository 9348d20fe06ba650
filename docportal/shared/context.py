"""Request context management using contextvars.

Provides async-safe storage for request-scoped data such as the
authenticated user. Similar to Flask's `g` or Django's request.user.

Usage:
    set_current_user(user_id)
    user_id = get_current_user_id()
"""

from contextvars import ContextVar
from uuid import UUID

_current_user_id: ContextVar[UUID | None] = ContextVar("current_user_id", default=None)


def set_current_user(user_id: UUID) -> None:
    """Set the authenticated user for this request.

    Called by the auth gate after the bearer token verifies. Context is
    scoped to the current async task.
    """
    _current_user_id.set(user_id)


def get_current_user_id() -> UUID | None:
    """Return the authenticated user ID, or None outside a protected request."""
    return _current_user_id.get()
