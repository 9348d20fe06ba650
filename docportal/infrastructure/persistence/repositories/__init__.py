"""Repository implementations and the per-session Repositories bundle."""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from docportal.infrastructure.persistence.repositories.base import EntityRepository
from docportal.infrastructure.persistence.repositories.client_repo import ClientRepository
from docportal.infrastructure.persistence.repositories.collection_repo import (
    CollectionRepository,
)
from docportal.infrastructure.persistence.repositories.file_repo import FileRepository
from docportal.infrastructure.persistence.repositories.firm_repo import FirmRepository
from docportal.infrastructure.persistence.repositories.request_repo import RequestRepository
from docportal.infrastructure.persistence.repositories.user_repo import UserRepository


@dataclass(frozen=True)
class Repositories:
    """All entity repositories bound to one session."""

    firms: FirmRepository
    users: UserRepository
    clients: ClientRepository
    collections: CollectionRepository
    requests: RequestRepository
    files: FileRepository

    @classmethod
    def for_session(cls, db: AsyncSession) -> "Repositories":
        return cls(
            firms=FirmRepository(db),
            users=UserRepository(db),
            clients=ClientRepository(db),
            collections=CollectionRepository(db),
            requests=RequestRepository(db),
            files=FileRepository(db),
        )


__all__ = [
    "ClientRepository",
    "CollectionRepository",
    "EntityRepository",
    "FileRepository",
    "FirmRepository",
    "Repositories",
    "RequestRepository",
    "UserRepository",
]
