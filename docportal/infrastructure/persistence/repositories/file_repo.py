"""File metadata repository. Interface methods return application DTOs."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from docportal.application.dtos.file import FileResult
from docportal.infrastructure.persistence.models.file import File
from docportal.infrastructure.persistence.repositories.base import EntityRepository
from docportal.shared.utils.datetime import ensure_utc


def _file_to_result(f: File) -> FileResult:
    return FileResult(
        id=f.id,
        request_id=f.request_id,
        file_name=f.file_name,
        storage_key=f.storage_key,
        file_size=f.file_size,
        mime_type=f.mime_type,
        created_at=ensure_utc(f.created_at),
        updated_at=ensure_utc(f.updated_at),
    )


class FileRepository(EntityRepository[File, FileResult]):
    """File metadata repository. Bytes are never stored here."""

    resource_type = "file"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, File, _file_to_result)

    async def list_by_request(self, request_id: UUID) -> Sequence[FileResult]:
        return await self._list_where(File.request_id == request_id)
