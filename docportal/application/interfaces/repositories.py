"""Repository interfaces (ports) for the application layer.

Protocols define the entity-store contract that infrastructure
implementations must fulfill. All types reference application DTOs only;
no infrastructure imports.

Every entity store raises ResourceNotFoundException for a missing id
(get, update, delete), ConflictException when a write violates a
uniqueness constraint, and DataStoreException for any other store failure.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, TypeVar
from uuid import UUID

if TYPE_CHECKING:
    from docportal.application.dtos.client import ClientResult
    from docportal.application.dtos.collection import CollectionResult
    from docportal.application.dtos.file import FileResult
    from docportal.application.dtos.firm import FirmResult
    from docportal.application.dtos.request import RequestResult
    from docportal.application.dtos.user import UserCredentials, UserResult

ResultT = TypeVar("ResultT", covariant=True)


class IEntityRepository(Protocol[ResultT]):
    """Generic CRUD contract shared by every entity kind."""

    async def get(self, entity_id: UUID) -> ResultT:
        """Return the entity; raise ResourceNotFoundException if absent."""

    async def list(self) -> Sequence[ResultT]:
        """Return every entity (unbounded, unfiltered), oldest first."""

    async def create(self, values: Mapping[str, Any]) -> ResultT:
        """Insert and return the new entity with server-assigned id and timestamps."""

    async def update(self, entity_id: UUID, changes: Mapping[str, Any]) -> ResultT:
        """Merge changes into the stored entity; absent fields keep their value."""

    async def delete(self, entity_id: UUID) -> None:
        """Delete the entity; raise ResourceNotFoundException if nothing was deleted."""


class IFirmRepository(IEntityRepository["FirmResult"], Protocol):
    """Protocol for firm repository."""


class IUserRepository(IEntityRepository["UserResult"], Protocol):
    """Protocol for user repository."""

    async def get_credentials_by_email(self, email: str) -> UserCredentials | None:
        """Return id and password hash for a (case-insensitive) email, or None."""

    async def list_by_firm(self, firm_id: UUID) -> Sequence[UserResult]:
        """Return users belonging to firm."""


class IClientRepository(IEntityRepository["ClientResult"], Protocol):
    """Protocol for client repository."""

    async def list_by_firm(self, firm_id: UUID) -> Sequence[ClientResult]:
        """Return clients belonging to firm."""


class ICollectionRepository(IEntityRepository["CollectionResult"], Protocol):
    """Protocol for collection repository."""


class IRequestRepository(IEntityRepository["RequestResult"], Protocol):
    """Protocol for document-request repository."""


class IFileRepository(IEntityRepository["FileResult"], Protocol):
    """Protocol for file metadata repository."""

    async def list_by_request(self, request_id: UUID) -> Sequence[FileResult]:
        """Return files attached to request."""
