"""DTOs for firm use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from docportal.application.dtos.client import ClientDetail
    from docportal.application.dtos.user import UserDetail


@dataclass(frozen=True)
class FirmResult:
    """Firm read-model. Also the flat firm embedded in every assembled response."""

    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class FirmDetail:
    """Firm with its users and clients assembled."""

    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
    users: list[UserDetail] = field(default_factory=list)
    clients: list[ClientDetail] = field(default_factory=list)
