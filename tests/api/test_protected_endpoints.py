"""Bearer-token gate on protected routers."""

from collections.abc import Callable
from datetime import timedelta
from typing import Any
from uuid import uuid4

import pytest
from httpx import AsyncClient

PROTECTED_PATHS = [
    "/api/v1/users",
    "/api/v1/firms",
    "/api/v1/clients",
    "/api/v1/collections",
    "/api/v1/requests",
    "/api/v1/files",
]


def _assert_unauthenticated(response: Any) -> None:
    assert response.status_code == 401
    assert response.headers.get("WWW-Authenticate") == "Bearer"
    data = response.json()
    assert data.get("error") == "AUTHENTICATION_ERROR"
    assert data.get("message") == "Not authenticated"


@pytest.mark.parametrize("path", PROTECTED_PATHS)
async def test_missing_authorization_returns_401(client: AsyncClient, path: str) -> None:
    """Protected list endpoints reject requests without a token."""
    _assert_unauthenticated(await client.get(path))


async def test_protected_write_without_token_returns_401(client: AsyncClient) -> None:
    """The gate runs before body validation, so an empty body still yields 401."""
    _assert_unauthenticated(await client.post("/api/v1/firms", json={}))


async def test_wrong_scheme_returns_401(
    client: AsyncClient, token_factory: Callable[..., str]
) -> None:
    """Only the Bearer scheme is accepted."""
    token = token_factory(uuid4())
    _assert_unauthenticated(
        await client.get("/api/v1/users", headers={"Authorization": f"Token {token}"})
    )


async def test_empty_bearer_returns_401(client: AsyncClient) -> None:
    _assert_unauthenticated(
        await client.get("/api/v1/users", headers={"Authorization": "Bearer "})
    )


async def test_garbled_token_returns_401(client: AsyncClient) -> None:
    """A token that is not a JWT at all is rejected."""
    _assert_unauthenticated(
        await client.get("/api/v1/users", headers={"Authorization": "Bearer not.a.jwt"})
    )


async def test_expired_token_returns_401(
    client: AsyncClient, token_factory: Callable[..., str]
) -> None:
    token = token_factory(uuid4(), expires_delta=timedelta(minutes=-1))
    _assert_unauthenticated(
        await client.get("/api/v1/users", headers={"Authorization": f"Bearer {token}"})
    )


async def test_token_signed_with_other_secret_returns_401(
    client: AsyncClient, token_factory: Callable[..., str]
) -> None:
    token = token_factory(uuid4(), secret="some-other-secret")
    _assert_unauthenticated(
        await client.get("/api/v1/users", headers={"Authorization": f"Bearer {token}"})
    )


async def test_non_uuid_subject_returns_401(
    client: AsyncClient, token_factory: Callable[..., str]
) -> None:
    token = token_factory("not-a-uuid")
    _assert_unauthenticated(
        await client.get("/api/v1/users", headers={"Authorization": f"Bearer {token}"})
    )


async def test_fresh_token_is_accepted_without_user_lookup(
    client: AsyncClient, token_factory: Callable[..., str]
) -> None:
    """A validly signed token is accepted even if its subject is not a stored user."""
    token = token_factory(uuid4())
    response = await client.get(
        "/api/v1/firms", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 200
    assert response.json() == []


async def test_login_token_grants_access(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    """The token issued by /login opens every protected list endpoint."""
    for path in PROTECTED_PATHS:
        response = await client.get(path, headers=auth_headers)
        assert response.status_code == 200, path
        assert isinstance(response.json(), list)
