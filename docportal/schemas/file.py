"""File metadata API schemas. Uploading bytes is handled elsewhere."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from docportal.schemas.request import RequestResponse

# Largest value a signed 64-bit BIGINT column holds.
MAX_FILE_SIZE = 2**63 - 1


class FileCreateRequest(BaseModel):
    """Request body for recording an uploaded file against a request."""

    request_id: UUID
    file_name: str = Field(..., min_length=1, max_length=255)
    storage_key: str = Field(..., min_length=1)
    file_size: int = Field(..., ge=0, le=MAX_FILE_SIZE)
    mime_type: str = Field(..., min_length=1, max_length=255)


class FileUpdate(BaseModel):
    """Request body for updating file metadata (partial)."""

    file_name: str | None = Field(default=None, min_length=1, max_length=255)
    mime_type: str | None = Field(default=None, min_length=1, max_length=255)


class FileResponse(BaseModel):
    """File metadata with its request chain."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    request: RequestResponse
    file_name: str
    storage_key: str
    file_size: int
    mime_type: str
    created_at: datetime
    updated_at: datetime
