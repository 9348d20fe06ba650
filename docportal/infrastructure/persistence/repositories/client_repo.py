"""Client repository. Interface methods return application DTOs."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docportal.application.dtos.client import ClientResult
from docportal.infrastructure.persistence.models.client import Client
from docportal.infrastructure.persistence.repositories.base import EntityRepository
from docportal.shared.utils.datetime import ensure_utc


def _client_to_result(c: Client) -> ClientResult:
    return ClientResult(
        id=c.id,
        firm_id=c.firm_id,
        company_name=c.company_name,
        email=c.email,
        created_at=ensure_utc(c.created_at),
        updated_at=ensure_utc(c.updated_at),
    )


class ClientRepository(EntityRepository[Client, ClientResult]):
    """Client repository."""

    resource_type = "client"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Client, _client_to_result)

    async def list_by_firm(self, firm_id: UUID) -> Sequence[ClientResult]:
        return await self._list_where(Client.firm_id == firm_id)
