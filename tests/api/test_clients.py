"""Client endpoints: CRUD with embedded firm."""

from typing import Any
from uuid import UUID, uuid4

from httpx import AsyncClient


async def test_create_client_embeds_firm(
    portal_client: dict[str, Any], firm_id: UUID
) -> None:
    assert portal_client["company_name"] == "Globex"
    assert portal_client["email"] == "books@globex.com"
    assert portal_client["firm"]["id"] == str(firm_id)
    assert portal_client["firm"]["name"] == "Acme Accounting"


async def test_get_client_round_trip(
    client: AsyncClient, auth_headers: dict[str, str], portal_client: dict[str, Any]
) -> None:
    response = await client.get(f"/api/v1/clients/{portal_client['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == portal_client


async def test_list_clients(
    client: AsyncClient, auth_headers: dict[str, str], portal_client: dict[str, Any]
) -> None:
    response = await client.get("/api/v1/clients", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == [portal_client]


async def test_update_client_email_only(
    client: AsyncClient, auth_headers: dict[str, str], portal_client: dict[str, Any]
) -> None:
    response = await client.patch(
        f"/api/v1/clients/{portal_client['id']}",
        headers=auth_headers,
        json={"email": "ap@globex.com"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["email"] == "ap@globex.com"
    assert data["company_name"] == "Globex"


async def test_create_client_for_missing_firm_fails(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    """Referencing a firm that does not exist is a store failure, not a 404."""
    response = await client.post(
        "/api/v1/clients",
        headers=auth_headers,
        json={"firm_id": str(uuid4()), "company_name": "Ghost", "email": "g@ghost.com"},
    )
    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_ERROR"


async def test_delete_client(
    client: AsyncClient, auth_headers: dict[str, str], portal_client: dict[str, Any]
) -> None:
    url = f"/api/v1/clients/{portal_client['id']}"
    assert (await client.delete(url, headers=auth_headers)).status_code == 204
    assert (await client.get(url, headers=auth_headers)).status_code == 404
    assert (await client.delete(url, headers=auth_headers)).status_code == 404
