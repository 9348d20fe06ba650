"""Document request API schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from docportal.schemas.collection import CollectionResponse


class RequestCreateRequest(BaseModel):
    """Request body for creating a document request in a collection."""

    collection_id: UUID
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class RequestUpdate(BaseModel):
    """Request body for updating a document request (partial)."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: str | None = Field(default=None, min_length=1, max_length=64)


class RequestResponse(BaseModel):
    """Document request with its collection chain."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    collection: CollectionResponse
    title: str
    description: str | None
    status: str
    created_at: datetime
    updated_at: datetime
