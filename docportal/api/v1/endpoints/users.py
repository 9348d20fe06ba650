"""User API: thin routes delegating to UserService and the response assembler."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from docportal.api.v1.dependencies import (
    get_assembler,
    get_assembler_for_write,
    get_repositories_for_write,
    get_user_service,
)
from docportal.application.services import ResponseAssembler, UserService
from docportal.infrastructure.persistence.repositories import Repositories
from docportal.schemas.user import UserCreateRequest, UserResponse, UserUpdate

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """List all users, each with its firm."""
    return [UserResponse.model_validate(u) for u in await assembler.list_users()]


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    body: UserCreateRequest,
    user_service: Annotated[UserService, Depends(get_user_service)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Create a user in a firm. Email must be unused (case-insensitive)."""
    user = await user_service.create_user(
        firm_id=body.firm_id,
        email=body.email,
        password=body.password,
        first_name=body.first_name,
        last_name=body.last_name,
    )
    return UserResponse.model_validate(await assembler.user(user.id))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """Get user by id."""
    return UserResponse.model_validate(await assembler.user(user_id))


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    body: UserUpdate,
    user_service: Annotated[UserService, Depends(get_user_service)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Update user profile fields; omitted fields keep their value."""
    user = await user_service.update_user(user_id, body.model_dump(exclude_none=True))
    return UserResponse.model_validate(await assembler.user(user.id))


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: UUID,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
):
    """Delete user. Collections owned by the user are removed by the store."""
    await repos.users.delete(user_id)
    return None
