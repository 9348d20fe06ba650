"""Collection repository. Interface methods return application DTOs."""

from sqlalchemy.ext.asyncio import AsyncSession

from docportal.application.dtos.collection import CollectionResult
from docportal.infrastructure.persistence.models.collection import Collection
from docportal.infrastructure.persistence.repositories.base import EntityRepository
from docportal.shared.utils.datetime import ensure_utc


def _collection_to_result(c: Collection) -> CollectionResult:
    return CollectionResult(
        id=c.id,
        client_id=c.client_id,
        user_id=c.user_id,
        title=c.title,
        status=c.status,
        access_token=c.access_token,
        expires_at=ensure_utc(c.expires_at),
        created_at=ensure_utc(c.created_at),
        updated_at=ensure_utc(c.updated_at),
    )


class CollectionRepository(EntityRepository[Collection, CollectionResult]):
    """Collection repository."""

    resource_type = "collection"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Collection, _collection_to_result)
