"""ID and token generators."""

import secrets
import uuid

# 32 random bytes, URL-safe base64 (43 characters).
ACCESS_TOKEN_BYTES = 32


def generate_uuid() -> uuid.UUID:
    """Generate a random primary key (UUID4)."""
    return uuid.uuid4()


def generate_access_token() -> str:
    """Generate an unguessable token that grants a client access to one collection."""
    return secrets.token_urlsafe(ACCESS_TOKEN_BYTES)
