"""File API: metadata records for uploaded files. Bytes are never handled here."""

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
from docportal.schemas.file import FileCreateRequest, FileResponse, FileUpdate

router = APIRouter()


@router.get("", response_model=list[FileResponse])
async def list_files(
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """List all file records."""
    return [FileResponse.model_validate(f) for f in await assembler.list_files()]


@router.post("", response_model=FileResponse, status_code=201)
async def create_file(
    body: FileCreateRequest,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Record an uploaded file against a document request."""
    created = await repos.files.create(body.model_dump())
    return FileResponse.model_validate(await assembler.file(created.id))


@router.get("/{file_id}", response_model=FileResponse)
async def get_file(
    file_id: UUID,
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """Get file record by id, with its request chain."""
    return FileResponse.model_validate(await assembler.file(file_id))


@router.patch("/{file_id}", response_model=FileResponse)
async def update_file(
    file_id: UUID,
    body: FileUpdate,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Rename a file or correct its mime type."""
    updated = await repos.files.update(file_id, body.model_dump(exclude_none=True))
    return FileResponse.model_validate(await assembler.file(updated.id))


@router.delete("/{file_id}", status_code=204)
async def delete_file(
    file_id: UUID,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
):
    """Delete file record. Stored bytes are not touched."""
    await repos.files.delete(file_id)
    return None
