"""Auth API: public registration and login.

These are the only endpoints reachable without a bearer token (besides
health); both are rate limited per client address.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from docportal.api.v1.dependencies import (
    get_assembler_for_write,
    get_auth_service,
    get_user_service,
)
from docportal.application.services import AuthService, ResponseAssembler, UserService
from docportal.core.limiter import limit_login, limit_register
from docportal.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from docportal.schemas.user import UserResponse

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=201)
@limit_register
async def register(
    request: Request,
    body: RegisterRequest,
    user_service: Annotated[UserService, Depends(get_user_service)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Register a new user under an existing firm (public endpoint)."""
    user = await user_service.create_user(
        firm_id=body.firm_id,
        email=body.email,
        password=body.password,
        first_name=body.first_name,
        last_name=body.last_name,
    )
    return UserResponse.model_validate(await assembler.user(user.id))


@router.post("/login", response_model=TokenResponse)
@limit_login
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Authenticate with email and password; return a JWT valid for one hour by default."""
    token = await auth_service.login(body.email, body.password)
    return TokenResponse(access_token=token, token_type="bearer")
