"""Firm endpoints: CRUD and nested users/clients."""

from typing import Any
from uuid import UUID, uuid4

from httpx import AsyncClient


async def test_create_firm_returns_empty_nested_lists(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    """POST /firms returns 201 with the firm and no users or clients yet."""
    response = await client.post(
        "/api/v1/firms", headers=auth_headers, json={"name": "Initech CPAs"}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Initech CPAs"
    assert data["users"] == []
    assert data["clients"] == []
    assert UUID(data["id"])
    assert data["created_at"]
    assert data["updated_at"]


async def test_get_firm_embeds_users_and_clients(
    client: AsyncClient,
    auth_headers: dict[str, str],
    firm_id: UUID,
    registered_user: dict[str, Any],
    portal_client: dict[str, Any],
) -> None:
    """GET /firms/{id} lists the firm's users and clients, each with the firm embedded."""
    response = await client.get(f"/api/v1/firms/{firm_id}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert [u["id"] for u in data["users"]] == [registered_user["id"]]
    assert [c["id"] for c in data["clients"]] == [portal_client["id"]]
    assert data["users"][0]["firm"]["id"] == str(firm_id)
    assert "password_hash" not in data["users"][0]
    assert data["clients"][0]["firm"]["name"] == "Acme Accounting"


async def test_list_firms_is_flat(
    client: AsyncClient, auth_headers: dict[str, str], firm_id: UUID
) -> None:
    """GET /firms returns firms without nested users or clients."""
    response = await client.get("/api/v1/firms", headers=auth_headers)
    assert response.status_code == 200
    firms = response.json()
    assert [f["id"] for f in firms] == [str(firm_id)]
    assert "users" not in firms[0]
    assert "clients" not in firms[0]


async def test_update_firm_name(
    client: AsyncClient, auth_headers: dict[str, str], firm_id: UUID
) -> None:
    response = await client.patch(
        f"/api/v1/firms/{firm_id}", headers=auth_headers, json={"name": "Acme & Co"}
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Acme & Co"


async def test_empty_patch_leaves_firm_unchanged(
    client: AsyncClient, auth_headers: dict[str, str], firm_id: UUID
) -> None:
    response = await client.patch(f"/api/v1/firms/{firm_id}", headers=auth_headers, json={})
    assert response.status_code == 200
    assert response.json()["name"] == "Acme Accounting"


async def test_get_missing_firm_returns_404(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    missing = uuid4()
    response = await client.get(f"/api/v1/firms/{missing}", headers=auth_headers)
    assert response.status_code == 404
    data = response.json()
    assert data["error"] == "RESOURCE_NOT_FOUND"
    assert data["message"] == f"firm not found: {missing}"


async def test_invalid_firm_id_returns_422(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get("/api/v1/firms/not-a-uuid", headers=auth_headers)
    assert response.status_code == 422


async def test_delete_firm_cascades_to_users_and_clients(
    client: AsyncClient,
    auth_headers: dict[str, str],
    firm_id: UUID,
    registered_user: dict[str, Any],
    portal_client: dict[str, Any],
) -> None:
    """Deleting a firm removes its users and clients; a second delete is 404."""
    response = await client.delete(f"/api/v1/firms/{firm_id}", headers=auth_headers)
    assert response.status_code == 204

    assert (await client.get(f"/api/v1/firms/{firm_id}", headers=auth_headers)).status_code == 404
    user = await client.get(f"/api/v1/users/{registered_user['id']}", headers=auth_headers)
    assert user.status_code == 404
    company = await client.get(f"/api/v1/clients/{portal_client['id']}", headers=auth_headers)
    assert company.status_code == 404

    again = await client.delete(f"/api/v1/firms/{firm_id}", headers=auth_headers)
    assert again.status_code == 404
