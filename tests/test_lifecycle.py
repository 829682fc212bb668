"""Reservation lifecycle manager tests"""

from datetime import date, time, timedelta

import pytest
from sqlalchemy import update

from tavola.errors import Conflict, InvalidArgument, NotFound
from tavola.models.reservation import Reservation, ReservationHistory, ReservationStatus as S
from tavola.schemas.reservation import ReservationCreate
from tavola.services.notifier import EventType
from tavola.services.reservations import (
    ALLOWED_TRANSITIONS,
    ReservationManager,
    can_transition,
    generate_confirmation_code,
)


class RecordingNotifier:
    """Collects published events instead of broadcasting them"""

    def __init__(self):
        self.events = []

    def publish(self, event_type, payload):
        self.events.append((event_type, payload))


def _booking(**overrides) -> ReservationCreate:
    fields = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "+15551234567",
        "date": date.today() + timedelta(days=3),
        "time": time(19, 0),
        "guests": 2,
    }
    fields.update(overrides)
    return ReservationCreate(**fields)


@pytest.mark.parametrize(
    "previous, new, allowed",
    [
        (S.PENDING, S.CONFIRMED, True),
        (S.PENDING, S.SEATED, True),
        (S.CONFIRMED, S.SEATED, True),
        (S.SEATED, S.COMPLETED, True),
        (S.PENDING, S.CANCELLED, True),
        (S.CONFIRMED, S.NO_SHOW, True),
        (S.PENDING, S.COMPLETED, False),
        (S.SEATED, S.CANCELLED, False),
        (S.COMPLETED, S.CONFIRMED, False),
        (S.CANCELLED, S.PENDING, False),
        (S.NO_SHOW, S.SEATED, False),
        (S.CONFIRMED, S.PENDING, False),
    ],
)
def test_transition_table(previous, new, allowed):
    assert can_transition(previous, new) is allowed


def test_transition_table_covers_every_status():
    assert set(ALLOWED_TRANSITIONS) == set(S)


def test_confirmation_code_format():
    code = generate_confirmation_code()
    assert len(code) == 8
    assert code == code.upper()
    assert code.isalnum()


@pytest.mark.asyncio
async def test_create_emits_new_reservation(test_db):
    notifier = RecordingNotifier()
    manager = ReservationManager(test_db, notifier)

    reservation = await manager.create(_booking())

    assert reservation.status == S.PENDING
    assert len(notifier.events) == 1
    event_type, payload = notifier.events[0]
    assert event_type == EventType.NEW_RESERVATION
    assert payload["confirmationCode"] == reservation.confirmation_code
    assert payload["status"] == "pending"


@pytest.mark.asyncio
async def test_create_keeps_explicit_end_time_and_duration(test_db):
    manager = ReservationManager(test_db)

    reservation = await manager.create(_booking(end_time=time(22, 0), estimated_duration=120, source="phone"))

    assert reservation.end_time == time(22, 0)
    assert reservation.estimated_duration == 120
    assert reservation.source == "phone"


@pytest.mark.asyncio
async def test_create_today_is_allowed(test_db):
    manager = ReservationManager(test_db)

    reservation = await manager.create(_booking(date=date.today()))

    assert reservation.id is not None


@pytest.mark.asyncio
async def test_status_update_event_carries_previous_status(test_db):
    notifier = RecordingNotifier()
    manager = ReservationManager(test_db, notifier)
    reservation = await manager.create(_booking())

    await manager.set_status(reservation.id, S.CONFIRMED)

    event_type, payload = notifier.events[-1]
    assert event_type == EventType.RESERVATION_STATUS_UPDATED
    assert payload["status"] == "confirmed"
    assert payload["previousStatus"] == "pending"


@pytest.mark.asyncio
async def test_rejected_update_emits_nothing(test_db):
    notifier = RecordingNotifier()
    manager = ReservationManager(test_db, notifier, strict_transitions=True)
    reservation = await manager.create(_booking())

    with pytest.raises(InvalidArgument):
        await manager.set_status(reservation.id, S.COMPLETED)

    assert [e[0] for e in notifier.events] == [EventType.NEW_RESERVATION]


@pytest.mark.asyncio
async def test_any_transition_allowed_by_default(test_db):
    manager = ReservationManager(test_db)
    reservation = await manager.create(_booking())

    updated = await manager.set_status(reservation.id, S.COMPLETED, reason="Walked in and paid")

    assert updated.status == S.COMPLETED
    assert updated.departure_time is not None
    history = await manager.history(reservation.id)
    assert [(h.previous_status, h.new_status) for h in history] == [
        (S.PENDING, S.PENDING),
        (S.PENDING, S.COMPLETED),
    ]


@pytest.mark.asyncio
async def test_history_tracks_every_change(test_db):
    manager = ReservationManager(test_db)
    reservation = await manager.create(_booking())

    for status in (S.CONFIRMED, S.SEATED, S.COMPLETED):
        await manager.set_status(reservation.id, status)

    history = await manager.history(reservation.id)
    assert [(h.previous_status, h.new_status) for h in history] == [
        (S.PENDING, S.PENDING),
        (S.PENDING, S.CONFIRMED),
        (S.CONFIRMED, S.SEATED),
        (S.SEATED, S.COMPLETED),
    ]


@pytest.mark.asyncio
async def test_update_bumps_version(test_db):
    manager = ReservationManager(test_db)
    reservation = await manager.create(_booking())
    version = reservation.version

    updated = await manager.set_status(reservation.id, S.CONFIRMED)

    assert updated.version == version + 1


class CommitsCompetingUpdate:
    """User lookup that lets another writer confirm the reservation first"""

    def __init__(self, db, users, reservation_id):
        self.db = db
        self.users = users
        self.reservation_id = reservation_id

    async def get(self, user_id, fresh=False):
        await self.db.execute(
            update(Reservation)
            .where(Reservation.id == self.reservation_id)
            .values(status=S.CONFIRMED, version=Reservation.version + 1)
            .execution_options(synchronize_session=False)
        )
        self.db.add(ReservationHistory(
            reservation_id=self.reservation_id,
            previous_status=S.PENDING,
            new_status=S.CONFIRMED,
            reason="Confirmed by phone",
        ))
        await self.db.commit()
        return await self.users.get(user_id, fresh=fresh)


@pytest.mark.asyncio
async def test_concurrent_update_loses_with_conflict(test_db, test_staff_user):
    notifier = RecordingNotifier()
    manager = ReservationManager(test_db, notifier)
    reservation = await manager.create(_booking())
    reservation_id = reservation.id
    actor_id = test_staff_user.id
    manager.users = CommitsCompetingUpdate(test_db, manager.users, reservation_id)

    with pytest.raises(Conflict) as exc_info:
        await manager.set_status(reservation_id, S.CANCELLED, actor_id=actor_id)

    assert exc_info.value.status_code == 409
    stored = await manager.reservations.get(reservation_id, fresh=True)
    assert stored.status == S.CONFIRMED
    history = await manager.history(reservation_id)
    assert [(h.previous_status, h.new_status) for h in history] == [
        (S.PENDING, S.PENDING),
        (S.PENDING, S.CONFIRMED),
    ]
    assert [e[0] for e in notifier.events] == [EventType.NEW_RESERVATION]


@pytest.mark.asyncio
async def test_set_status_unknown_reservation(test_db):
    manager = ReservationManager(test_db)

    with pytest.raises(NotFound):
        await manager.set_status(12345, S.CONFIRMED)


@pytest.mark.asyncio
async def test_search_minimum_length(test_db):
    manager = ReservationManager(test_db)

    with pytest.raises(InvalidArgument):
        await manager.search(" a ")
