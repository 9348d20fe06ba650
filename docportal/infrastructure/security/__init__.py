"""Security: JWT, password hashing, and the bearer-token gate."""

from docportal.infrastructure.security.auth_gate import AuthGate
from docportal.infrastructure.security.jwt import create_access_token, verify_token
from docportal.infrastructure.security.password import (
    get_dummy_hash,
    get_password_hash,
    verify_password,
)

__all__ = [
    "AuthGate",
    "create_access_token",
    "get_dummy_hash",
    "get_password_hash",
    "verify_password",
    "verify_token",
]
