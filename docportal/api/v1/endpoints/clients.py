"""Client API: CRUD; responses embed the client's firm."""

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
from docportal.schemas.client import ClientCreateRequest, ClientResponse, ClientUpdate

router = APIRouter()


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """List all clients, each with its firm."""
    return [ClientResponse.model_validate(c) for c in await assembler.list_clients()]


@router.post("", response_model=ClientResponse, status_code=201)
async def create_client(
    body: ClientCreateRequest,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Create a client of a firm."""
    client = await repos.clients.create(body.model_dump())
    return ClientResponse.model_validate(await assembler.client(client.id))


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: UUID,
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """Get client by id."""
    return ClientResponse.model_validate(await assembler.client(client_id))


@router.patch("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: UUID,
    body: ClientUpdate,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Update client; omitted fields keep their value."""
    client = await repos.clients.update(client_id, body.model_dump(exclude_none=True))
    return ClientResponse.model_validate(await assembler.client(client.id))


@router.delete("/{client_id}", status_code=204)
async def delete_client(
    client_id: UUID,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
):
    """Delete client."""
    await repos.clients.delete(client_id)
    return None
