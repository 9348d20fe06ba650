"""Auth dependencies: token/password adapters and the bearer-token gate (composition root)."""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header

from docportal.core.config import Settings, get_settings
from docportal.infrastructure.security import (
    AuthGate,
    create_access_token,
    get_dummy_hash,
    get_password_hash,
    verify_password,
)
from docportal.shared.context import set_current_user


class AuthSecurity:
    """Token and password hashing provided via DI (no direct infra imports in services)."""

    def __init__(self, settings: Settings) -> None:
        self._secret = settings.secret_key.get_secret_value()
        self._algorithm = settings.algorithm
        self._expires = timedelta(minutes=settings.access_token_expire_minutes)

    def create_access_token(self, subject: UUID) -> str:
        return create_access_token(
            str(subject), self._secret, expires_delta=self._expires, algorithm=self._algorithm
        )

    def hash_password(self, password: str) -> str:
        return get_password_hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return verify_password(plain_password, hashed_password)

    def dummy_hash(self) -> str:
        return get_dummy_hash()


def get_auth_security() -> AuthSecurity:
    """Auth token creation and password hashing (composition root)."""
    return AuthSecurity(get_settings())


def get_auth_gate() -> AuthGate:
    """Bearer-token gate configured with the server secret."""
    settings = get_settings()
    return AuthGate(settings.secret_key.get_secret_value(), settings.algorithm)


async def require_user_id(
    gate: Annotated[AuthGate, Depends(get_auth_gate)],
    authorization: Annotated[str | None, Header()] = None,
) -> UUID:
    """Authenticate the request and return the user id from the token.

    Applied at router level to every protected router. Also stores the user id
    in the request context (see docportal.shared.context).
    """
    user_id = gate.authenticate(authorization)
    set_current_user(user_id)
    return user_id
