"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from docportal.application.dtos.firm import FirmResult


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get, create, update). No password."""

    id: UUID
    firm_id: UUID
    email: str
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class UserCredentials:
    """Login lookup result. Only used to verify a password; never serialized."""

    id: UUID
    email: str
    password_hash: str


@dataclass(frozen=True)
class UserDetail:
    """User with its firm embedded."""

    id: UUID
    firm: FirmResult
    email: str
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime
