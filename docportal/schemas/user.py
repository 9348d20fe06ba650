"""User API schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from docportal.schemas.common import FirmSummaryResponse


class UserCreateRequest(BaseModel):
    """Request body for creating a user in a firm."""

    firm_id: UUID
    email: EmailStr
    password: str
    first_name: str = Field(..., min_length=1, max_length=128)
    last_name: str = Field(..., min_length=1, max_length=128)


class UserUpdate(BaseModel):
    """Request body for updating a user (partial). Password is not changed here."""

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, min_length=1, max_length=128)
    last_name: str | None = Field(default=None, min_length=1, max_length=128)


class UserResponse(BaseModel):
    """User with its firm (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    firm: FirmSummaryResponse
    email: str
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime
