"""Collection API schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docportal.schemas.client import ClientResponse
from docportal.schemas.user import UserResponse
from docportal.shared.utils.datetime import ensure_utc


class CollectionCreateRequest(BaseModel):
    """Request body for creating a collection. Status, access token and expiry are server-assigned."""

    client_id: UUID
    user_id: UUID
    title: str = Field(..., min_length=1, max_length=255)


class CollectionUpdate(BaseModel):
    """Request body for updating a collection (partial)."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    status: str | None = Field(default=None, min_length=1, max_length=64)
    access_token: str | None = Field(default=None, min_length=1)
    expires_at: datetime | None = None

    @field_validator("expires_at")
    @classmethod
    def expires_at_utc(cls, v: datetime | None) -> datetime | None:
        # SQLite drops offsets on write; store the UTC instant.
        return ensure_utc(v) if v is not None else None


class CollectionResponse(BaseModel):
    """Collection with its client and user."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    client: ClientResponse
    user: UserResponse
    title: str
    status: str
    access_token: str
    expires_at: datetime
    created_at: datetime
    updated_at: datetime
