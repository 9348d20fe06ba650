"""User application service: create (register) and update users."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any, Protocol
from uuid import UUID

from docportal.application.dtos.user import UserResult
from docportal.application.interfaces.repositories import IUserRepository
from docportal.core.constants import MIN_PASSWORD_LENGTH
from docportal.domain.exceptions import ValidationException


class PasswordHasher(Protocol):
    def hash_password(self, password: str) -> str: ...


def normalize_email(email: str) -> str:
    """Lowercase and strip an email so uniqueness is case-insensitive."""
    return email.strip().lower()


def validate_password(password: str) -> None:
    """Raise ValidationException if password is too short."""
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationException(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.",
            field="password",
        )


class UserService:
    """Create and update users. Hashing runs in a worker thread (bcrypt is slow by design)."""

    def __init__(self, user_repo: IUserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    async def create_user(
        self,
        firm_id: UUID,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> UserResult:
        """Validate, hash and insert. Raises DuplicateEmailException on an existing email."""
        validate_password(password)
        password_hash = await asyncio.to_thread(self._hasher.hash_password, password)
        return await self._user_repo.create(
            {
                "firm_id": firm_id,
                "email": normalize_email(email),
                "password_hash": password_hash,
                "first_name": first_name,
                "last_name": last_name,
            }
        )

    async def update_user(self, user_id: UUID, changes: Mapping[str, Any]) -> UserResult:
        """Partial update of profile fields; email is normalized like on create."""
        values = dict(changes)
        if "email" in values:
            values["email"] = normalize_email(values["email"])
        return await self._user_repo.update(user_id, values)
