"""Collection API: CRUD; responses embed client and user (each with firm)."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from docportal.api.v1.dependencies import (
    get_assembler,
    get_assembler_for_write,
    get_collection_service,
    get_repositories_for_write,
)
from docportal.application.services import CollectionService, ResponseAssembler
from docportal.infrastructure.persistence.repositories import Repositories
from docportal.schemas.collection import (
    CollectionCreateRequest,
    CollectionResponse,
    CollectionUpdate,
)

router = APIRouter()


@router.get("", response_model=list[CollectionResponse])
async def list_collections(
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """List all collections."""
    return [
        CollectionResponse.model_validate(c) for c in await assembler.list_collections()
    ]


@router.post("", response_model=CollectionResponse, status_code=201)
async def create_collection(
    body: CollectionCreateRequest,
    collection_service: Annotated[CollectionService, Depends(get_collection_service)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Create a pending collection with a fresh client access token."""
    collection = await collection_service.create_collection(
        client_id=body.client_id, user_id=body.user_id, title=body.title
    )
    return CollectionResponse.model_validate(await assembler.collection(collection.id))


@router.get("/{collection_id}", response_model=CollectionResponse)
async def get_collection(
    collection_id: UUID,
    assembler: Annotated[ResponseAssembler, Depends(get_assembler)],
):
    """Get collection by id."""
    return CollectionResponse.model_validate(await assembler.collection(collection_id))


@router.patch("/{collection_id}", response_model=CollectionResponse)
async def update_collection(
    collection_id: UUID,
    body: CollectionUpdate,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
    assembler: Annotated[ResponseAssembler, Depends(get_assembler_for_write)],
):
    """Update collection; omitted fields keep their value."""
    collection = await repos.collections.update(
        collection_id, body.model_dump(exclude_none=True)
    )
    return CollectionResponse.model_validate(await assembler.collection(collection.id))


@router.delete("/{collection_id}", status_code=204)
async def delete_collection(
    collection_id: UUID,
    repos: Annotated[Repositories, Depends(get_repositories_for_write)],
):
    """Delete collection."""
    await repos.collections.delete(collection_id)
    return None
