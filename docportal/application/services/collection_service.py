"""Collection service: create collections with a client access token and expiry."""

from __future__ import annotations

from datetime import timedelta
from uuid import UUID

from docportal.application.dtos.collection import CollectionResult
from docportal.application.interfaces.repositories import ICollectionRepository
from docportal.core.constants import STATUS_PENDING
from docportal.shared.utils import generate_access_token, utc_now


class CollectionService:
    """Create collections. Client and user are not checked for a shared firm."""

    def __init__(
        self,
        collection_repo: ICollectionRepository,
        access_ttl: timedelta = timedelta(days=1),
    ) -> None:
        self._collection_repo = collection_repo
        self._access_ttl = access_ttl

    async def create_collection(
        self, client_id: UUID, user_id: UUID, title: str
    ) -> CollectionResult:
        """Insert a pending collection whose access token expires after access_ttl."""
        return await self._collection_repo.create(
            {
                "client_id": client_id,
                "user_id": user_id,
                "title": title,
                "status": STATUS_PENDING,
                "access_token": generate_access_token(),
                "expires_at": utc_now() + self._access_ttl,
            }
        )
