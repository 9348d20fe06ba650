"""Document request API: CRUD plus the files attached to a request."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from docportal.api.v1.dependencies import (
    get_assembler,
    get_assembler_for_write,
    get_repositories_for_write,
)
from docportal.application.services import ResponseAssembler
from docportal.core.constants import STATUS_PENDING
from docportal.infrastructure.persistence.repositories import Repositories
from docportal.schemas.file import FileResponse
from docportal.schemas.request import (
    RequestCreateRequest,
    RequestResponse,
    RequestUpdate,
)

router = APIRouter()


@router.get("", response_model=list[RequestResponse])
async def list_requests(
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """List all document requests."""
    return [RequestResponse.model_validate(r) for r in await assembler.list_requests()]


@router.post("", response_model=RequestResponse, status_code=201)
async def create_request(
    body: RequestCreateRequest,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Create a pending document request in a collection."""
    values = body.model_dump()
    values["status"] = STATUS_PENDING
    created = await repos.requests.create(values)
    return RequestResponse.model_validate(await assembler.request(created.id))


@router.get("/{request_id}", response_model=RequestResponse)
async def get_request(
    request_id: UUID,
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """Get document request by id."""
    return RequestResponse.model_validate(await assembler.request(request_id))


@router.get("/{request_id}/files", response_model=list[FileResponse])
async def list_request_files(
    request_id: UUID,
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """List files attached to a request; 404 if the request does not exist."""
    files = await assembler.list_files_for_request(request_id)
    return [FileResponse.model_validate(f) for f in files]


@router.patch("/{request_id}", response_model=RequestResponse)
async def update_request(
    request_id: UUID,
    body: RequestUpdate,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Update document request; omitted fields keep their value."""
    updated = await repos.requests.update(request_id, body.model_dump(exclude_none=True))
    return RequestResponse.model_validate(await assembler.request(updated.id))


@router.delete("/{request_id}", status_code=204)
async def delete_request(
    request_id: UUID,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
):
    """Delete document request."""
    await repos.requests.delete(request_id)
    return None
