"""User repository. Interface methods return application DTOs (never the password hash,
except through get_credentials_by_email for login)."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docportal.application.dtos.user import UserCredentials, UserResult
from docportal.domain.exceptions import DuplicateEmailException, PortalException
from docportal.infrastructure.persistence.models.user import User
from docportal.infrastructure.persistence.repositories.base import EntityRepository
from docportal.shared.utils.datetime import ensure_utc


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        firm_id=u.firm_id,
        email=u.email,
        first_name=u.first_name,
        last_name=u.last_name,
        created_at=ensure_utc(u.created_at),
        updated_at=ensure_utc(u.updated_at),
    )


class UserRepository(EntityRepository[User, UserResult]):
    """User repository. Emails are stored lower-cased by the service layer."""

    resource_type = "user"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User, _user_to_result)

    async def get_credentials_by_email(self, email: str) -> UserCredentials | None:
        """Return id and password hash for the given (lower-cased) email, or None."""
        result = await self.db.execute(select(User).where(User.email == email.lower()))
        user = result.scalar_one_or_none()
        if user is None:
            return None
        return UserCredentials(id=user.id, email=user.email, password_hash=user.password_hash)

    async def list_by_firm(self, firm_id: UUID) -> Sequence[UserResult]:
        return await self._list_where(User.firm_id == firm_id)

    def _conflict(self) -> PortalException:
        return DuplicateEmailException()
