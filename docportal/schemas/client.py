"""Client API schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from docportal.schemas.common import FirmSummaryResponse


class ClientCreateRequest(BaseModel):
    """Request body for creating a client of a firm."""

    firm_id: UUID
    company_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr


class ClientUpdate(BaseModel):
    """Request body for updating a client (partial)."""

    company_name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None


class ClientResponse(BaseModel):
    """Client with its firm."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    firm: FirmSummaryResponse
    company_name: str
    email: str
    created_at: datetime
    updated_at: datetime
