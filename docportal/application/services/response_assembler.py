"""Response assembly: resolve an entity's foreign-key ancestors into one nested view.

Composition, innermost first:

    Client     = client fields + firm
    User       = user fields (never the password hash) + firm
    Collection = collection fields + Client + User
    Request    = request fields + Collection
    File       = file fields + Request
    Firm       = firm fields + its Users + its Clients

Each read goes to the entity store separately; the reads are not assumed to
observe one consistent snapshot. If any ancestor is missing once the leaf has
been read (e.g. the parent was deleted concurrently), the store's
ResourceNotFoundException propagates and nothing is returned: a view is only
built after every read it depends on has succeeded.

Ancestors are memoized per assembly call, so listing N requests from one
collection reads that collection (and its client, user, firms) once. Output is
identical to resolving every leaf independently.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TypeVar
from uuid import UUID

from docportal.application.dtos.client import ClientDetail, ClientResult
from docportal.application.dtos.collection import CollectionDetail, CollectionResult
from docportal.application.dtos.file import FileDetail, FileResult
from docportal.application.dtos.firm import FirmDetail, FirmResult
from docportal.application.dtos.request import RequestDetail, RequestResult
from docportal.application.dtos.user import UserDetail, UserResult
from docportal.application.interfaces.repositories import (
    IClientRepository,
    ICollectionRepository,
    IFileRepository,
    IFirmRepository,
    IRequestRepository,
    IUserRepository,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


@dataclass
class _Memo:
    """Per-call cache of resolved ancestors, keyed by id."""

    firms: dict[UUID, FirmResult] = field(default_factory=dict)
    clients: dict[UUID, ClientDetail] = field(default_factory=dict)
    users: dict[UUID, UserDetail] = field(default_factory=dict)
    collections: dict[UUID, CollectionDetail] = field(default_factory=dict)
    requests: dict[UUID, RequestDetail] = field(default_factory=dict)


async def _cached(
    cache: dict[UUID, _T], key: UUID, load: Callable[[], Awaitable[_T]]
) -> _T:
    if key in cache:
        return cache[key]
    value = await load()
    cache[key] = value
    return value


class ResponseAssembler:
    """Build nested views from the entity stores.

    Operations on one AsyncSession must not overlap, so ancestors are
    resolved sequentially rather than with asyncio.gather.
    """

    def __init__(
        self,
        firms: IFirmRepository,
        users: IUserRepository,
        clients: IClientRepository,
        collections: ICollectionRepository,
        requests: IRequestRepository,
        files: IFileRepository,
    ) -> None:
        self.firms = firms
        self.users = users
        self.clients = clients
        self.collections = collections
        self.requests = requests
        self.files = files

    # ---- single entity ----

    async def firm(self, firm_id: UUID) -> FirmDetail:
        """Firm with its users and clients (each embedding the same firm)."""
        firm = await self.firms.get(firm_id)
        memo = _Memo(firms={firm.id: firm})
        users = [
            await self._user_from(u, memo) for u in await self.users.list_by_firm(firm_id)
        ]
        clients = [
            await self._client_from(c, memo)
            for c in await self.clients.list_by_firm(firm_id)
        ]
        return FirmDetail(
            id=firm.id,
            name=firm.name,
            created_at=firm.created_at,
            updated_at=firm.updated_at,
            users=users,
            clients=clients,
        )

    async def user(self, user_id: UUID) -> UserDetail:
        return await self._user(user_id, _Memo())

    async def client(self, client_id: UUID) -> ClientDetail:
        return await self._client(client_id, _Memo())

    async def collection(self, collection_id: UUID) -> CollectionDetail:
        return await self._collection(collection_id, _Memo())

    async def request(self, request_id: UUID) -> RequestDetail:
        return await self._request(request_id, _Memo())

    async def file(self, file_id: UUID) -> FileDetail:
        row = await self.files.get(file_id)
        return await self._file_from(row, _Memo())

    # ---- list forms ----

    async def list_firms(self) -> list[FirmResult]:
        """Flat firms (no nested users/clients), as in the firm listing."""
        return list(await self.firms.list())

    async def list_users(self) -> list[UserDetail]:
        memo = _Memo()
        return [await self._user_from(u, memo) for u in await self.users.list()]

    async def list_clients(self) -> list[ClientDetail]:
        memo = _Memo()
        return [await self._client_from(c, memo) for c in await self.clients.list()]

    async def list_collections(self) -> list[CollectionDetail]:
        memo = _Memo()
        return [
            await self._collection_from(c, memo) for c in await self.collections.list()
        ]

    async def list_requests(self) -> list[RequestDetail]:
        memo = _Memo()
        return [await self._request_from(r, memo) for r in await self.requests.list()]

    async def list_files(self) -> list[FileDetail]:
        memo = _Memo()
        return [await self._file_from(f, memo) for f in await self.files.list()]

    async def list_files_for_request(self, request_id: UUID) -> list[FileDetail]:
        """Files of one request. Raises ResourceNotFoundException if the request is missing."""
        memo = _Memo()
        await self._request(request_id, memo)
        rows = await self.files.list_by_request(request_id)
        return [await self._file_from(f, memo) for f in rows]

    # ---- resolution ----

    async def _firm(self, firm_id: UUID, memo: _Memo) -> FirmResult:
        return await _cached(memo.firms, firm_id, lambda: self.firms.get(firm_id))

    async def _user(self, user_id: UUID, memo: _Memo) -> UserDetail:
        async def load() -> UserDetail:
            return await self._user_from(await self.users.get(user_id), memo)

        return await _cached(memo.users, user_id, load)

    async def _user_from(self, row: UserResult, memo: _Memo) -> UserDetail:
        firm = await self._firm(row.firm_id, memo)
        detail = UserDetail(
            id=row.id,
            firm=firm,
            email=row.email,
            first_name=row.first_name,
            last_name=row.last_name,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
        memo.users[row.id] = detail
        return detail

    async def _client(self, client_id: UUID, memo: _Memo) -> ClientDetail:
        async def load() -> ClientDetail:
            return await self._client_from(await self.clients.get(client_id), memo)

        return await _cached(memo.clients, client_id, load)

    async def _client_from(self, row: ClientResult, memo: _Memo) -> ClientDetail:
        firm = await self._firm(row.firm_id, memo)
        detail = ClientDetail(
            id=row.id,
            firm=firm,
            company_name=row.company_name,
            email=row.email,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
        memo.clients[row.id] = detail
        return detail

    async def _collection(self, collection_id: UUID, memo: _Memo) -> CollectionDetail:
        async def load() -> CollectionDetail:
            row = await self.collections.get(collection_id)
            return await self._collection_from(row, memo)

        return await _cached(memo.collections, collection_id, load)

    async def _collection_from(
        self, row: CollectionResult, memo: _Memo
    ) -> CollectionDetail:
        client = await self._client(row.client_id, memo)
        user = await self._user(row.user_id, memo)
        if client.firm.id != user.firm.id:
            # Not enforced on write; surfaced here so inconsistent graphs are visible in logs.
            logger.warning(
                "Collection %s references client and user from different firms (%s, %s)",
                row.id,
                client.firm.id,
                user.firm.id,
            )
        detail = CollectionDetail(
            id=row.id,
            client=client,
            user=user,
            title=row.title,
            status=row.status,
            access_token=row.access_token,
            expires_at=row.expires_at,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
        memo.collections[row.id] = detail
        return detail

    async def _request(self, request_id: UUID, memo: _Memo) -> RequestDetail:
        async def load() -> RequestDetail:
            return await self._request_from(await self.requests.get(request_id), memo)

        return await _cached(memo.requests, request_id, load)

    async def _request_from(self, row: RequestResult, memo: _Memo) -> RequestDetail:
        collection = await self._collection(row.collection_id, memo)
        detail = RequestDetail(
            id=row.id,
            collection=collection,
            title=row.title,
            description=row.description,
            status=row.status,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
        memo.requests[row.id] = detail
        return detail

    async def _file_from(self, row: FileResult, memo: _Memo) -> FileDetail:
        request = await self._request(row.request_id, memo)
        return FileDetail(
            id=row.id,
            request=request,
            file_name=row.file_name,
            storage_key=row.storage_key,
            file_size=row.file_size,
            mime_type=row.mime_type,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
