"""Table and time-slot availability tests"""

from datetime import time

import pytest
from httpx import AsyncClient

from tavola.errors import InvalidArgument
from tavola.models.schedule import TimeSlot
from tavola.services.availability import AvailabilityResolver
from tavola.utils.time import day_of_week


def _numbers(response) -> list:
    assert response.status_code == 200, response.text
    return [t["tableNumber"] for t in response.json()["tables"]]


@pytest.mark.asyncio
async def test_capacity_window_and_ordering(client: AsyncClient, test_tables, future_date):
    params = {"date": future_date.isoformat(), "time": "19:00", "partySize": 2}

    response = await client.get("/api/tables/available", params=params)

    # 2..4 seats, smallest first; maintenance and inactive tables are never offered
    assert _numbers(response) == ["A1", "A2", "B1", "C1", "C2"]
    assert response.json()["count"] == 5


@pytest.mark.asyncio
async def test_large_parties_get_large_tables_only(client: AsyncClient, test_tables, future_date):
    day = future_date.isoformat()

    assert _numbers(await client.get("/api/tables/available", params={"date": day, "time": "19:00", "partySize": 5})) == ["D1"]
    assert _numbers(await client.get("/api/tables/available", params={"date": day, "time": "19:00", "partySize": 7})) == ["E1"]
    assert _numbers(await client.get("/api/tables/available", params={"date": day, "time": "19:00", "partySize": 9})) == []


@pytest.mark.asyncio
async def test_booked_table_excluded_at_same_slot_only(client: AsyncClient, test_tables, future_date, reservation_payload):
    table_id = test_tables["A1"].id
    response = await client.post("/api/reservations", json={**reservation_payload, "assignedTableId": table_id})
    assert response.status_code == 201

    day = future_date.isoformat()
    same_slot = await client.get("/api/tables/available", params={"date": day, "time": "19:00", "partySize": 2})
    assert "A1" not in _numbers(same_slot)

    other_time = await client.get("/api/tables/available", params={"date": day, "time": "19:30", "partySize": 2})
    assert "A1" in _numbers(other_time)


@pytest.mark.asyncio
async def test_cancelled_booking_frees_table(client: AsyncClient, test_tables, future_date, reservation_payload):
    table_id = test_tables["A1"].id
    created = await client.post("/api/reservations", json={**reservation_payload, "assignedTableId": table_id})
    reservation_id = created.json()["reservation"]["id"]

    await client.patch(f"/api/reservations/{reservation_id}/status", json={"status": "cancelled"})

    params = {"date": future_date.isoformat(), "time": "19:00", "partySize": 2}
    assert "A1" in _numbers(await client.get("/api/tables/available", params=params))


@pytest.mark.asyncio
async def test_confirmed_booking_still_holds_table(client: AsyncClient, test_tables, future_date, reservation_payload):
    table_id = test_tables["B1"].id
    created = await client.post("/api/reservations", json={**reservation_payload, "assignedTableId": table_id})
    reservation_id = created.json()["reservation"]["id"]

    await client.patch(f"/api/reservations/{reservation_id}/status", json={"status": "confirmed"})

    params = {"date": future_date.isoformat(), "time": "19:00", "partySize": 2}
    assert "B1" not in _numbers(await client.get("/api/tables/available", params=params))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params",
    [
        {"date": "2030-01-01", "time": "19:00", "partySize": 0},
        {"date": "not-a-date", "time": "19:00", "partySize": 2},
        {"date": "2030-01-01", "time": "25:00", "partySize": 2},
        {"date": "2030-01-01", "time": "19:00"},
        {"date": "2030-01-01", "time": "19:00", "partySize": "two"},
    ],
)
async def test_invalid_availability_queries(client: AsyncClient, params):
    response = await client.get("/api/tables/available", params=params)

    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_resolver_with_custom_slack(test_db, test_tables, future_date):
    resolver = AvailabilityResolver(test_db, capacity_slack=0)

    tables = await resolver.available_tables(future_date, time(19, 0), 4)

    assert [t.table_number for t in tables] == ["C1", "C2"]


@pytest.mark.asyncio
async def test_resolver_rejects_non_positive_party(test_db):
    resolver = AvailabilityResolver(test_db)

    with pytest.raises(InvalidArgument):
        await resolver.available_tables("2030-01-01", "19:00", -1)


@pytest.mark.asyncio
async def test_time_slots_for_weekday(client: AsyncClient, test_db, future_date):
    weekday = day_of_week(future_date)
    test_db.add_all([
        TimeSlot(start_time=time(20, 0), end_time=time(21, 0), day_of_week=weekday, max_reservations=5),
        TimeSlot(start_time=time(18, 0), end_time=time(19, 0), day_of_week=weekday, max_reservations=5),
        TimeSlot(start_time=time(19, 0), end_time=time(20, 0), day_of_week=weekday, max_reservations=5, is_active=False),
        TimeSlot(start_time=time(18, 0), end_time=time(19, 0), day_of_week=(weekday + 1) % 7, max_reservations=5),
    ])
    await test_db.commit()

    response = await client.get("/api/time-slots", params={"date": future_date.isoformat(), "partySize": 4})

    assert response.status_code == 200
    data = response.json()
    assert data["date"] == future_date.isoformat()
    assert data["partySize"] == 4
    assert [s["startTime"] for s in data["timeSlots"]] == ["18:00:00", "20:00:00"]


@pytest.mark.asyncio
async def test_time_slots_invalid_date(client: AsyncClient):
    response = await client.get("/api/time-slots", params={"date": "31/12/2030"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_time_slot_listed_past_its_ceiling(client: AsyncClient, test_db, future_date, reservation_payload):
    test_db.add(TimeSlot(start_time=time(19, 0), end_time=time(20, 0), day_of_week=day_of_week(future_date), max_reservations=1))
    await test_db.commit()
    for _ in range(2):
        response = await client.post("/api/reservations", json=reservation_payload)
        assert response.status_code == 201

    response = await client.get("/api/time-slots", params={"date": future_date.isoformat()})

    slots = response.json()["timeSlots"]
    assert [(s["startTime"], s["maxReservations"]) for s in slots] == [("19:00:00", 1)]


@pytest.mark.asyncio
async def test_time_slots_reject_trailing_garbage(client: AsyncClient):
    response = await client.get("/api/time-slots", params={"date": "2030-12-31junk"})
    assert response.status_code == 400
