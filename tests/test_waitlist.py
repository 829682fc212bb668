"""Waitlist API tests"""

import pytest
from httpx import AsyncClient


async def _check_in(client: AsyncClient, name: str = "Walk In", party_size: int = 3) -> dict:
    response = await client.post(
        "/api/waitlist",
        json={"name": name, "phone": "+15550001111", "partySize": party_size, "estimatedWaitTime": 20},
    )
    assert response.status_code == 201, response.text
    return response.json()["entry"]


@pytest.mark.asyncio
async def test_check_in(client: AsyncClient):
    entry = await _check_in(client)

    assert entry["status"] == "waiting"
    assert entry["partySize"] == 3
    assert entry["notificationSent"] is False
    assert entry["checkInTime"] is not None


@pytest.mark.asyncio
async def test_current_waitlist_is_fifo_and_waiting_only(client: AsyncClient):
    first = await _check_in(client, "First")
    second = await _check_in(client, "Second")
    seated = await _check_in(client, "Seated")
    await client.patch(f"/api/waitlist/{seated['id']}/status", json={"status": "seated"})

    response = await client.get("/api/waitlist")

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert [e["id"] for e in data["entries"]] == [first["id"], second["id"]]


@pytest.mark.asyncio
async def test_status_timestamps(client: AsyncClient):
    entry = await _check_in(client)

    seated = (await client.patch(f"/api/waitlist/{entry['id']}/status", json={"status": "seated"})).json()["entry"]
    assert seated["seatedTime"] is not None
    assert seated["leftTime"] is None

    left = (await client.patch(f"/api/waitlist/{entry['id']}/status", json={"status": "left"})).json()["entry"]
    assert left["leftTime"] is not None


@pytest.mark.asyncio
async def test_notified_resets_notification_flag(client: AsyncClient):
    entry = await _check_in(client)

    response = await client.patch(f"/api/waitlist/{entry['id']}/status", json={"status": "notified"})

    assert response.status_code == 200
    updated = response.json()["entry"]
    assert updated["status"] == "notified"
    assert updated["notificationSent"] is False


@pytest.mark.asyncio
async def test_unknown_entry(client: AsyncClient):
    response = await client.patch("/api/waitlist/404/status", json={"status": "seated"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_invalid_check_in(client: AsyncClient):
    response = await client.post("/api/waitlist", json={"name": "No Size", "phone": "+15550001111"})

    assert response.status_code == 400
    assert any(error["field"] == "partySize" for error in response.json()["errors"])
