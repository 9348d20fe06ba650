"""Auth API schemas."""

from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request body for public registration under an existing firm.

    Password length is checked by the user service (400), not here.
    """

    firm_id: UUID
    email: EmailStr
    password: str = Field(..., description="Password (min 8 characters)")
    first_name: str = Field(..., min_length=1, max_length=128)
    last_name: str = Field(..., min_length=1, max_length=128)


class LoginRequest(BaseModel):
    """Request body for login. Email is matched case-insensitively."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """JWT token response."""

    access_token: str
    token_type: str = "bearer"
