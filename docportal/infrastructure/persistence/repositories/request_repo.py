"""Document-request repository. Interface methods return application DTOs."""

from sqlalchemy.ext.asyncio import AsyncSession

from docportal.application.dtos.request import RequestResult
from docportal.infrastructure.persistence.models.request import DocumentRequest
from docportal.infrastructure.persistence.repositories.base import EntityRepository
from docportal.shared.utils.datetime import ensure_utc


def _request_to_result(r: DocumentRequest) -> RequestResult:
    return RequestResult(
        id=r.id,
        collection_id=r.collection_id,
        title=r.title,
        description=r.description,
        status=r.status,
        created_at=ensure_utc(r.created_at),
        updated_at=ensure_utc(r.updated_at),
    )


class RequestRepository(EntityRepository[DocumentRequest, RequestResult]):
    """Document-request repository."""

    resource_type = "request"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, DocumentRequest, _request_to_result)
