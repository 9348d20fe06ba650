"""Shared utilities: datetime and generators."""

from docportal.shared.utils.datetime import ensure_utc, utc_now
from docportal.shared.utils.generators import generate_access_token, generate_uuid

__all__ = [
    "ensure_utc",
    "generate_access_token",
    "generate_uuid",
    "utc_now",
]
