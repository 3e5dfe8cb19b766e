"""Token issuance and admin-only access."""
from __future__ import annotations

import pytest
from httpx import AsyncClient

from bistro.core.security import issue_access_token

pytestmark = pytest.mark.asyncio


async def _authenticate(client: AsyncClient, email: str, password: str) -> dict[str, str]:
    response = await client.post(
        "/api/v1/auth/token",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


async def test_login_and_me(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _authenticate(
        client, app_context["admin_email"], app_context["admin_password"]  # type: ignore[arg-type]
    )
    me = await client.get("/api/v1/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["role"] == "admin"


async def test_login_rejects_bad_password(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await client.post(
        "/api/v1/auth/token",
        data={"username": app_context["admin_email"], "password": "wrong-password"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 401


async def test_admin_routes_require_a_token(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await client.post("/api/v1/blocked-dates", json={"blocked_date": "2030-01-01"})
    assert response.status_code == 401
    listing = await client.get("/api/v1/reservations")
    assert listing.status_code == 401


async def test_admin_routes_reject_non_admins(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _authenticate(
        client, app_context["staff_email"], app_context["staff_password"]  # type: ignore[arg-type]
    )
    response = await client.post(
        "/api/v1/recurring-closed-days", json={"day_of_week": 1}, headers=headers
    )
    assert response.status_code == 403


async def test_token_for_unknown_user_is_rejected(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    token = issue_access_token("00000000-0000-0000-0000-000000000000", role="admin")
    response = await client.get(
        "/api/v1/reservations", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 401
