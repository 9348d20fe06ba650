"""Firm API schemas."""

from pydantic import BaseModel, Field

from docportal.schemas.client import ClientResponse
from docportal.schemas.common import FirmSummaryResponse
from docportal.schemas.user import UserResponse


class FirmCreateRequest(BaseModel):
    """Request body for creating a firm."""

    name: str = Field(..., min_length=1, max_length=255)


class FirmUpdate(BaseModel):
    """Request body for updating a firm (partial)."""

    name: str | None = Field(default=None, min_length=1, max_length=255)


class FirmResponse(FirmSummaryResponse):
    """Firm with its users and clients."""

    users: list[UserResponse] = Field(default_factory=list)
    clients: list[ClientResponse] = Field(default_factory=list)


__all__ = ["FirmCreateRequest", "FirmResponse", "FirmSummaryResponse", "FirmUpdate"]
