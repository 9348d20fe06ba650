"""DTOs for client use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from docportal.application.dtos.firm import FirmResult


@dataclass(frozen=True)
class ClientResult:
    """Client read-model."""

    id: UUID
    firm_id: UUID
    company_name: str
    email: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ClientDetail:
    """Client with its firm embedded."""

    id: UUID
    firm: FirmResult
    company_name: str
    email: str
    created_at: datetime
    updated_at: datetime
