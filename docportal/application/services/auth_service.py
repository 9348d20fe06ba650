"""Authentication service: credential login that issues a signed access token."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol
from uuid import UUID

from docportal.application.interfaces.repositories import IUserRepository
from docportal.application.services.user_service import normalize_email
from docportal.domain.exceptions import AuthenticationException

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class CredentialSecurity(Protocol):
    def verify_password(self, plain_password: str, hashed_password: str) -> bool: ...

    def dummy_hash(self) -> str: ...

    def create_access_token(self, subject: UUID) -> str: ...


class AuthService:
    """Login by email and password.

    Unknown email and wrong password raise the same AuthenticationException.
    An unknown email is still checked against a dummy hash so response time
    does not reveal whether the account exists.
    """

    def __init__(self, user_repo: IUserRepository, security: CredentialSecurity) -> None:
        self._user_repo = user_repo
        self._security = security

    async def login(self, email: str, password: str) -> str:
        """Return a signed access token for valid credentials."""
        credentials = await self._user_repo.get_credentials_by_email(normalize_email(email))
        if credentials is None:
            await asyncio.to_thread(self._check_dummy, password)
            logger.debug("Login failed: unknown email")
            raise AuthenticationException(INVALID_CREDENTIALS)
        matches = await asyncio.to_thread(
            self._security.verify_password, password, credentials.password_hash
        )
        if not matches:
            logger.debug("Login failed for user %s: password mismatch", credentials.id)
            raise AuthenticationException(INVALID_CREDENTIALS)
        return self._security.create_access_token(credentials.id)

    def _check_dummy(self, password: str) -> None:
        # Dummy hash is computed lazily on first use, so it runs in the worker thread too.
        self._security.verify_password(password, self._security.dummy_hash())
