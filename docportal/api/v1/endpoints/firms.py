"""Firm API: CRUD; single-firm responses embed the firm's users and clients."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from docportal.api.v1.dependencies import (
    get_assembler,
    get_assembler_for_write,
    get_repositories_for_write,
)
from docportal.application.services import ResponseAssembler
from docportal.infrastructure.persistence.repositories import Repositories
from docportal.schemas.firm import (
    FirmCreateRequest,
    FirmResponse,
    FirmSummaryResponse,
    FirmUpdate,
)

router = APIRouter()


@router.get("", response_model=list[FirmSummaryResponse])
async def list_firms(
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """List all firms (flat, without users and clients)."""
    return [FirmSummaryResponse.model_validate(f) for f in await assembler.list_firms()]


@router.post("", response_model=FirmResponse, status_code=201)
async def create_firm(
    body: FirmCreateRequest,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Create a firm."""
    firm = await repos.firms.create(body.model_dump())
    return FirmResponse.model_validate(await assembler.firm(firm.id))


@router.get("/{firm_id}", response_model=FirmResponse)
async def get_firm(
    firm_id: UUID,
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """Get firm by id with its users and clients."""
    return FirmResponse.model_validate(await assembler.firm(firm_id))


@router.patch("/{firm_id}", response_model=FirmResponse)
async def update_firm(
    firm_id: UUID,
    body: FirmUpdate,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Update firm; omitted fields keep their value."""
    firm = await repos.firms.update(firm_id, body.model_dump(exclude_none=True))
    return FirmResponse.model_validate(await assembler.firm(firm.id))


@router.delete("/{firm_id}", status_code=204)
async def delete_firm(
    firm_id: UUID,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
):
    """Delete firm. Its users, clients and everything below are removed by the store."""
    await repos.firms.delete(firm_id)
    return None
