"""Pytest configuration and fixtures for docportal.

Every test gets a fresh in-memory SQLite database (aiosqlite, one shared
connection via StaticPool, foreign keys on) attached to a fresh app as
app.state.database. ASGITransport does not run the lifespan, so the fixture
attaches the database itself.
"""

import os

# Settings are validated on first get_settings(); set required env before importing the app.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-do-not-use-in-production")

from collections.abc import AsyncIterator, Callable
from datetime import timedelta
from typing import Any
from uuid import UUID

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from docportal.core.config import get_settings
from docportal.core.limiter import limiter
from docportal.infrastructure.persistence.database import Database
from docportal.infrastructure.persistence.repositories import FirmRepository
from docportal.infrastructure.security.jwt import create_access_token
from docportal.main import create_app

TEST_PASSWORD = "password123"


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> None:
    """Rate-limit counters are process-wide; start every test from zero."""
    limiter.reset()


@pytest.fixture
async def database() -> AsyncIterator[Database]:
    """Fresh in-memory database with all tables created."""
    db = Database(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def db_session(database: Database) -> AsyncIterator[AsyncSession]:
    """Session for repository tests. Rolls back after the test."""
    async with database.session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def app(database: Database) -> FastAPI:
    application = create_app()
    application.state.database = database
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def _make_token(
    subject: Any,
    *,
    secret: str | None = None,
    expires_delta: timedelta = timedelta(minutes=5),
) -> str:
    """Sign a token the way login does, with overridable secret and lifetime."""
    settings = get_settings()
    key = secret if secret is not None else settings.secret_key.get_secret_value()
    return create_access_token(
        str(subject), key, expires_delta=expires_delta, algorithm=settings.algorithm
    )


@pytest.fixture
def token_factory() -> Callable[..., str]:
    """Build bearer tokens directly (custom subject, secret or lifetime)."""
    return _make_token


@pytest.fixture
async def firm_id(database: Database) -> UUID:
    """Firm seeded directly in the store (creating firms over HTTP needs a token)."""
    async with database.transaction() as session:
        firm = await FirmRepository(session).create({"name": "Acme Accounting"})
    return firm.id


@pytest.fixture
async def registered_user(client: AsyncClient, firm_id: UUID) -> dict[str, Any]:
    """User registered via POST /register under the seeded firm."""
    response = await client.post(
        "/api/v1/register",
        json={
            "firm_id": str(firm_id),
            "email": "a@x.com",
            "password": TEST_PASSWORD,
            "first_name": "Ada",
            "last_name": "Lovelace",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def auth_headers(client: AsyncClient, registered_user: dict[str, Any]) -> dict[str, str]:
    """Login as the registered user; return headers for protected requests."""
    response = await client.post(
        "/api/v1/login",
        json={"email": registered_user["email"], "password": TEST_PASSWORD},
    )
    assert response.status_code == 200, response.text
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def portal_client(
    client: AsyncClient, auth_headers: dict[str, str], firm_id: UUID
) -> dict[str, Any]:
    """Client company of the seeded firm, created via the API."""
    response = await client.post(
        "/api/v1/clients",
        headers=auth_headers,
        json={"firm_id": str(firm_id), "company_name": "Globex", "email": "books@globex.com"},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def collection(
    client: AsyncClient,
    auth_headers: dict[str, str],
    portal_client: dict[str, Any],
    registered_user: dict[str, Any],
) -> dict[str, Any]:
    """Collection for the seeded client, owned by the registered user."""
    response = await client.post(
        "/api/v1/collections",
        headers=auth_headers,
        json={
            "client_id": portal_client["id"],
            "user_id": registered_user["id"],
            "title": "2025 tax return",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def document_request(
    client: AsyncClient, auth_headers: dict[str, str], collection: dict[str, Any]
) -> dict[str, Any]:
    """Document request inside the seeded collection."""
    response = await client.post(
        "/api/v1/requests",
        headers=auth_headers,
        json={
            "collection_id": collection["id"],
            "title": "W-2 forms",
            "description": "All W-2s for 2025",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def file_record(
    client: AsyncClient, auth_headers: dict[str, str], document_request: dict[str, Any]
) -> dict[str, Any]:
    """File metadata attached to the seeded request."""
    response = await client.post(
        "/api/v1/files",
        headers=auth_headers,
        json={
            "request_id": document_request["id"],
            "file_name": "w2-employer-a.pdf",
            "storage_key": "uploads/abc123/w2-employer-a.pdf",
            "file_size": 48213,
            "mime_type": "application/pdf",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()
