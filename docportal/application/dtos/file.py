"""DTOs for uploaded-file metadata (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from docportal.application.dtos.request import RequestDetail


@dataclass(frozen=True)
class FileResult:
    """File metadata read-model. storage_key points into external blob storage."""

    id: UUID
    request_id: UUID
    file_name: str
    storage_key: str
    file_size: int
    mime_type: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class FileDetail:
    """File with its request (and the request's full ancestor chain) embedded."""

    id: UUID
    request: RequestDetail
    file_name: str
    storage_key: str
    file_size: int
    mime_type: str
    created_at: datetime
    updated_at: datetime
