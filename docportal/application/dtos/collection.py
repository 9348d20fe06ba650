"""DTOs for collection use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from docportal.application.dtos.client import ClientDetail
from docportal.application.dtos.user import UserDetail


@dataclass(frozen=True)
class CollectionResult:
    """Collection read-model."""

    id: UUID
    client_id: UUID
    user_id: UUID
    title: str
    status: str
    access_token: str
    expires_at: datetime
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class CollectionDetail:
    """Collection with its client and user (each with their firm) embedded."""

    id: UUID
    client: ClientDetail
    user: UserDetail
    title: str
    status: str
    access_token: str
    expires_at: datetime
    created_at: datetime
    updated_at: datetime
