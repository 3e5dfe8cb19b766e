"""Online booking submission and reservation administration."""
from __future__ import annotations

from typing import Any

import pytest
from httpx import AsyncClient

from bistro.core.config import get_settings
from bistro.core.timezones import restaurant_today

pytestmark = pytest.mark.asyncio


async def _authenticate(client: AsyncClient, email: str, password: str) -> dict[str, str]:
    response = await client.post(
        "/api/v1/auth/token",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def _booking(day: str, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "customer_name": "Hanako Sato",
        "customer_email": "Hanako@Example.com",
        "customer_phone": "090-1234-5678",
        "reservation_date": day,
        "reservation_time": "18:30",
        "party_size": 2,
    }
    payload.update(overrides)
    return payload


async def test_submit_reservation_starts_pending(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    day = str(restaurant_today().add_days(7))

    response = await client.post("/api/v1/reservations", json=_booking(day))
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending"
    assert body["reservation_date"] == day
    assert body["customer_email"] == "hanako@example.com"


@pytest.mark.parametrize(
    "overrides",
    [
        {"reservation_time": "24:00"},
        {"reservation_time": "7pm"},
        {"party_size": 0},
        {"customer_email": "not-an-email"},
        {"customer_name": ""},
    ],
)
async def test_submit_reservation_validates_payload(
    app_context: dict[str, object], overrides: dict[str, Any]
) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    day = str(restaurant_today().add_days(7))
    response = await client.post("/api/v1/reservations", json=_booking(day, **overrides))
    assert response.status_code == 422


async def test_submit_reservation_rejects_past_and_blocked_dates(
    app_context: dict[str, object],
) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _authenticate(
        client, app_context["admin_email"], app_context["admin_password"]  # type: ignore[arg-type]
    )

    yesterday = str(restaurant_today().add_days(-1))
    past = await client.post("/api/v1/reservations", json=_booking(yesterday))
    assert past.status_code == 409
    assert past.json()["detail"]["state"] == "past_date"

    blocked_day = str(restaurant_today().add_days(10))
    block = await client.post(
        "/api/v1/blocked-dates",
        json={"blocked_date": blocked_day, "reason": "Private party"},
        headers=headers,
    )
    assert block.status_code == 201
    rejected = await client.post("/api/v1/reservations", json=_booking(blocked_day))
    assert rejected.status_code == 409
    assert rejected.json()["detail"] == {
        "message": "Selected date is not available for online booking",
        "state": "closed_by_rule",
        "reason": "Private party",
    }


async def test_submit_reservation_respects_lead_window(
    app_context: dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("RESERVATION_LEAD_DAYS", "3")
    get_settings.cache_clear()
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]

    soon = await client.post(
        "/api/v1/reservations", json=_booking(str(restaurant_today().add_days(2)))
    )
    assert soon.status_code == 409
    assert soon.json()["detail"]["state"] == "in_lead_window"

    later = await client.post(
        "/api/v1/reservations", json=_booking(str(restaurant_today().add_days(3)))
    )
    assert later.status_code == 201


async def test_capacity_counts_only_non_cancelled(
    app_context: dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("RESERVATION_DAILY_CAPACITY", "2")
    get_settings.cache_clear()
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _authenticate(
        client, app_context["admin_email"], app_context["admin_password"]  # type: ignore[arg-type]
    )
    day = str(restaurant_today().add_days(5))

    first = await client.post("/api/v1/reservations", json=_booking(day))
    second = await client.post(
        "/api/v1/reservations", json=_booking(day, reservation_time="19:00")
    )
    assert first.status_code == second.status_code == 201

    full = await client.post("/api/v1/reservations", json=_booking(day, reservation_time="20:00"))
    assert full.status_code == 409
    assert full.json()["detail"]["state"] == "at_capacity"

    cancelled = await client.patch(
        f"/api/v1/reservations/{first.json()['id']}/status",
        json={"status": "cancelled"},
        headers=headers,
    )
    assert cancelled.status_code == 200

    retry = await client.post("/api/v1/reservations", json=_booking(day, reservation_time="20:00"))
    assert retry.status_code == 201


async def test_manual_booking_bypasses_online_rules(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _authenticate(
        client, app_context["admin_email"], app_context["admin_password"]  # type: ignore[arg-type]
    )
    day = str(restaurant_today().add_days(4))
    await client.post("/api/v1/blocked-dates", json={"blocked_date": day}, headers=headers)

    manual = await client.post(
        "/api/v1/reservations/manual",
        json=_booking(day, customer_phone=None),
        headers=headers,
    )
    assert manual.status_code == 201
    assert manual.json()["status"] == "approved"

    anonymous = await client.post("/api/v1/reservations/manual", json=_booking(day))
    assert anonymous.status_code == 401


async def test_admin_list_filters_and_edits(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _authenticate(
        client, app_context["admin_email"], app_context["admin_password"]  # type: ignore[arg-type]
    )
    today = restaurant_today()
    early = str(today.add_days(3))
    late = str(today.add_days(12))

    a = await client.post("/api/v1/reservations", json=_booking(late, reservation_time="19:00"))
    b = await client.post("/api/v1/reservations", json=_booking(early, reservation_time="18:00"))
    c = await client.post("/api/v1/reservations", json=_booking(early, reservation_time="17:00"))
    assert {a.status_code, b.status_code, c.status_code} == {201}

    everything = await client.get("/api/v1/reservations", headers=headers)
    assert [row["id"] for row in everything.json()] == [
        c.json()["id"],
        b.json()["id"],
        a.json()["id"],
    ]

    approved = await client.patch(
        f"/api/v1/reservations/{b.json()['id']}/status",
        json={"status": "approved"},
        headers=headers,
    )
    assert approved.json()["status"] == "approved"

    by_status = await client.get(
        "/api/v1/reservations", params={"status": "approved"}, headers=headers
    )
    assert [row["id"] for row in by_status.json()] == [b.json()["id"]]

    by_range = await client.get(
        "/api/v1/reservations",
        params={"start_date": late, "end_date": late},
        headers=headers,
    )
    assert [row["id"] for row in by_range.json()] == [a.json()["id"]]

    edited = await client.patch(
        f"/api/v1/reservations/{a.json()['id']}",
        json={"party_size": 6, "special_requests": "Window seat"},
        headers=headers,
    )
    assert edited.status_code == 200
    assert edited.json()["party_size"] == 6
    assert edited.json()["special_requests"] == "Window seat"

    fetched = await client.get(f"/api/v1/reservations/{a.json()['id']}", headers=headers)
    assert fetched.json()["party_size"] == 6

    deleted = await client.delete(f"/api/v1/reservations/{a.json()['id']}", headers=headers)
    assert deleted.status_code == 204
    gone = await client.get(f"/api/v1/reservations/{a.json()['id']}", headers=headers)
    assert gone.status_code == 404
