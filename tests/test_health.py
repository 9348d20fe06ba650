"""Smoke tests for health and app wiring (middleware headers)."""

import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok without a token."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_response_carries_request_and_correlation_ids(client: AsyncClient) -> None:
    """A generated request id is echoed and reused as correlation id."""
    response = await client.get("/api/v1/health")
    request_id = response.headers.get("X-Request-ID")
    assert request_id
    assert response.headers.get("X-Correlation-ID") == request_id


async def test_safe_client_request_id_is_forwarded(client: AsyncClient) -> None:
    """A well-formed X-Request-ID from the client is kept."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "trace-42"})
    assert response.headers.get("X-Request-ID") == "trace-42"


async def test_unsafe_client_request_id_is_replaced(client: AsyncClient) -> None:
    """Request ids with characters unsafe for logs are replaced."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id\twith spaces"}
    )
    assert response.headers.get("X-Request-ID") != "bad id\twith spaces"


async def test_security_headers_present(client: AsyncClient) -> None:
    """Security headers are set on every response."""
    response = await client.get("/api/v1/health")
    assert response.headers.get("X-Content-Type-Options") == "nosniff"
    assert response.headers.get("X-Frame-Options") == "DENY"


async def test_unknown_route_returns_json_404(client: AsyncClient) -> None:
    """Unknown paths use the JSON error body."""
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json().get("error") == "HTTP_ERROR"


async def test_unhandled_error_is_logged_with_detail_and_hidden_from_client(
    app: FastAPI, caplog: pytest.LogCaptureFixture
) -> None:
    """An unexpected exception returns a generic 500; its text goes to the log only."""

    async def explode() -> None:
        raise RuntimeError("ledger checksum mismatch")

    app.add_api_route("/api/v1/explode", explode, methods=["GET"])
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        with caplog.at_level(logging.ERROR, logger="docportal.core.exception_handlers"):
            response = await ac.get("/api/v1/explode")

    assert response.status_code == 500
    assert response.json()["message"] == "Internal server error"
    assert "ledger checksum mismatch" not in response.text
    assert "ledger checksum mismatch" in caplog.text
    assert "RuntimeError" in caplog.text
