"""ResponseAssembler tests against in-memory fake repositories."""

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID, uuid4

import pytest

from docportal.application.dtos import (
    ClientResult,
    CollectionResult,
    FileResult,
    FirmResult,
    RequestResult,
    UserResult,
)
from docportal.application.services import ResponseAssembler
from docportal.domain.exceptions import ResourceNotFoundException

NOW = datetime(2025, 1, 1, tzinfo=UTC)


class FakeRepo:
    """Dict-backed repository recording how often get() is called."""

    def __init__(self, resource_type: str, parent_field: str | None = None) -> None:
        self.resource_type = resource_type
        self.parent_field = parent_field
        self.rows: dict[UUID, Any] = {}
        self.get_calls = 0

    def add(self, row: Any) -> Any:
        self.rows[row.id] = row
        return row

    async def get(self, entity_id: UUID) -> Any:
        self.get_calls += 1
        if entity_id not in self.rows:
            raise ResourceNotFoundException(self.resource_type, entity_id)
        return self.rows[entity_id]

    async def list(self) -> Sequence[Any]:
        return list(self.rows.values())

    async def create(self, values: Mapping[str, Any]) -> Any:
        raise NotImplementedError

    async def update(self, entity_id: UUID, changes: Mapping[str, Any]) -> Any:
        raise NotImplementedError

    async def delete(self, entity_id: UUID) -> None:
        self.rows.pop(entity_id)

    async def _children(self, parent_id: UUID) -> Sequence[Any]:
        return [r for r in self.rows.values() if getattr(r, self.parent_field) == parent_id]

    async def list_by_firm(self, firm_id: UUID) -> Sequence[Any]:
        return await self._children(firm_id)

    async def list_by_request(self, request_id: UUID) -> Sequence[Any]:
        return await self._children(request_id)


@pytest.fixture
def repos() -> dict[str, FakeRepo]:
    return {
        "firms": FakeRepo("firm"),
        "users": FakeRepo("user", "firm_id"),
        "clients": FakeRepo("client", "firm_id"),
        "collections": FakeRepo("collection"),
        "requests": FakeRepo("request"),
        "files": FakeRepo("file", "request_id"),
    }


@pytest.fixture
def assembler(repos: dict[str, FakeRepo]) -> ResponseAssembler:
    return ResponseAssembler(**repos)


@pytest.fixture
def graph(repos: dict[str, FakeRepo]) -> dict[str, Any]:
    """One firm with a user, a client, a collection, two requests and three files."""
    firm = repos["firms"].add(FirmResult(uuid4(), "Acme", NOW, NOW))
    user = repos["users"].add(UserResult(uuid4(), firm.id, "a@x.com", "Ada", "L", NOW, NOW))
    client = repos["clients"].add(ClientResult(uuid4(), firm.id, "Globex", "g@x.com", NOW, NOW))
    collection = repos["collections"].add(
        CollectionResult(
            uuid4(), client.id, user.id, "Taxes", "pending", "tok", NOW + timedelta(days=1), NOW, NOW
        )
    )
    req_a = repos["requests"].add(
        RequestResult(uuid4(), collection.id, "W-2", None, "pending", NOW, NOW)
    )
    req_b = repos["requests"].add(
        RequestResult(uuid4(), collection.id, "1099", "all", "pending", NOW, NOW)
    )
    files = [
        repos["files"].add(
            FileResult(uuid4(), req.id, f"f{i}.pdf", f"k{i}", 10 * i, "application/pdf", NOW, NOW)
        )
        for i, req in enumerate([req_a, req_a, req_b])
    ]
    return {
        "firm": firm,
        "user": user,
        "client": client,
        "collection": collection,
        "requests": [req_a, req_b],
        "files": files,
    }


async def test_file_is_assembled_through_every_ancestor(
    assembler: ResponseAssembler, graph: dict[str, Any]
) -> None:
    leaf = graph["files"][0]
    detail = await assembler.file(leaf.id)
    assert detail.file_name == leaf.file_name
    assert detail.request.id == leaf.request_id
    assert detail.request.collection.id == graph["collection"].id
    assert detail.request.collection.client.firm == graph["firm"]
    assert detail.request.collection.user.firm == graph["firm"]
    assert detail.request.collection.user.email == "a@x.com"


async def test_user_detail_has_no_password_field(
    assembler: ResponseAssembler, graph: dict[str, Any]
) -> None:
    detail = await assembler.user(graph["user"].id)
    assert not hasattr(detail, "password_hash")
    assert detail.firm == graph["firm"]


async def test_firm_detail_lists_users_and_clients(
    assembler: ResponseAssembler, graph: dict[str, Any]
) -> None:
    detail = await assembler.firm(graph["firm"].id)
    assert [u.id for u in detail.users] == [graph["user"].id]
    assert [c.id for c in detail.clients] == [graph["client"].id]
    assert detail.users[0].firm == graph["firm"]


async def test_missing_ancestor_fails_whole_assembly(
    assembler: ResponseAssembler, repos: dict[str, FakeRepo], graph: dict[str, Any]
) -> None:
    """If a parent vanished after the leaf was written, no partial view is returned."""
    await repos["clients"].delete(graph["client"].id)
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await assembler.file(graph["files"][0].id)
    assert exc_info.value.details["resource_type"] == "client"


async def test_missing_leaf_raises_not_found(assembler: ResponseAssembler) -> None:
    with pytest.raises(ResourceNotFoundException):
        await assembler.request(uuid4())


async def test_list_memoizes_shared_ancestors(
    assembler: ResponseAssembler, repos: dict[str, FakeRepo], graph: dict[str, Any]
) -> None:
    """Listing three files reads each shared ancestor once."""
    details = await assembler.list_files()
    assert len(details) == 3
    assert repos["collections"].get_calls == 1
    assert repos["clients"].get_calls == 1
    assert repos["users"].get_calls == 1
    assert repos["firms"].get_calls == 1
    assert repos["requests"].get_calls == 2


async def test_memoized_output_matches_independent_assembly(
    assembler: ResponseAssembler, graph: dict[str, Any]
) -> None:
    listed = await assembler.list_files()
    single = [await assembler.file(f.id) for f in graph["files"]]
    assert listed == single


async def test_list_files_for_request(
    assembler: ResponseAssembler, graph: dict[str, Any]
) -> None:
    req_a = graph["requests"][0]
    details = await assembler.list_files_for_request(req_a.id)
    assert [d.id for d in details] == [f.id for f in graph["files"][:2]]
    assert all(d.request.id == req_a.id for d in details)


async def test_list_files_for_missing_request_raises(assembler: ResponseAssembler) -> None:
    with pytest.raises(ResourceNotFoundException):
        await assembler.list_files_for_request(uuid4())


async def test_cross_firm_collection_is_assembled_and_logged(
    assembler: ResponseAssembler,
    repos: dict[str, FakeRepo],
    graph: dict[str, Any],
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Co-tenancy is not enforced; a mismatched collection still assembles, with a warning."""
    other_firm = repos["firms"].add(FirmResult(uuid4(), "Other", NOW, NOW))
    outsider = repos["users"].add(
        UserResult(uuid4(), other_firm.id, "o@y.com", "O", "Y", NOW, NOW)
    )
    mixed = repos["collections"].add(
        CollectionResult(
            uuid4(), graph["client"].id, outsider.id, "Mixed", "pending", "t2", NOW, NOW, NOW
        )
    )
    detail = await assembler.collection(mixed.id)
    assert detail.client.firm.id != detail.user.firm.id
    assert "different firms" in caplog.text
