"""DTOs for document-request use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from docportal.application.dtos.collection import CollectionDetail


@dataclass(frozen=True)
class RequestResult:
    """Request read-model: one line item of documents within a collection."""

    id: UUID
    collection_id: UUID
    title: str
    description: str | None
    status: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class RequestDetail:
    """Request with its full collection chain embedded."""

    id: UUID
    collection: CollectionDetail
    title: str
    description: str | None
    status: str
    created_at: datetime
    updated_at: datetime
