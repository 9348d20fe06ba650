"""Shared utilities: request context, logging, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from docportal.shared.context import (
    get_current_user_id,
    set_current_user,
)
from docportal.shared.utils import (
    ensure_utc,
    generate_access_token,
    generate_uuid,
    utc_now,
)

__all__ = [
    "ensure_utc",
    "generate_access_token",
    "generate_uuid",
    "get_current_user_id",
    "set_current_user",
    "utc_now",
]
