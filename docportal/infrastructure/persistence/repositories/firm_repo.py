"""Firm repository. Interface methods return application DTOs."""

from sqlalchemy.ext.asyncio import AsyncSession

from docportal.application.dtos.firm import FirmResult
from docportal.infrastructure.persistence.models.firm import Firm
from docportal.infrastructure.persistence.repositories.base import EntityRepository
from docportal.shared.utils.datetime import ensure_utc


def _firm_to_result(f: Firm) -> FirmResult:
    return FirmResult(
        id=f.id,
        name=f.name,
        created_at=ensure_utc(f.created_at),
        updated_at=ensure_utc(f.updated_at),
    )


class FirmRepository(EntityRepository[Firm, FirmResult]):
    """Firm repository."""

    resource_type = "firm"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Firm, _firm_to_result)
