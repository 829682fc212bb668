"""Reservation lifecycle: booking, status transitions, lookups"""

from datetime import date, datetime
from typing import Dict, FrozenSet, List, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError
import structlog

from tavola.config import settings
from tavola.errors import Conflict, InvalidArgument, NotFound
from tavola.models.reservation import Reservation, ReservationHistory, ReservationStatus
from tavola.models.table import TableStatus
from tavola.repositories import (
    ReservationHistoryRepository,
    ReservationRepository,
    SpecialEventRepository,
    TableRepository,
    UserRepository,
)
from tavola.schemas.reservation import ReservationCreate, ReservationResponse
from tavola.services.notifier import EventType, Notifier
from tavola.utils.time import add_minutes

logger = structlog.get_logger()

CONFIRMATION_CODE_LENGTH = 8
MIN_SEARCH_LENGTH = 2
INITIAL_HISTORY_REASON = "Initial reservation creation"

S = ReservationStatus

# Allowed previous statuses for each target status
ALLOWED_TRANSITIONS: Dict[ReservationStatus, FrozenSet[ReservationStatus]] = {
    S.PENDING: frozenset(),
    S.CONFIRMED: frozenset({S.PENDING}),
    S.SEATED: frozenset({S.PENDING, S.CONFIRMED}),
    S.COMPLETED: frozenset({S.SEATED}),
    S.CANCELLED: frozenset({S.PENDING, S.CONFIRMED}),
    S.NO_SHOW: frozenset({S.PENDING, S.CONFIRMED}),
}


def generate_confirmation_code() -> str:
    """8 uppercase alphanumeric characters; uniqueness is enforced by the database"""
    return uuid.uuid4().hex[:CONFIRMATION_CODE_LENGTH].upper()


def can_transition(previous: ReservationStatus, new: ReservationStatus) -> bool:
    return previous in ALLOWED_TRANSITIONS[new]


def serialize_reservation(reservation: Reservation) -> dict:
    return ReservationResponse.model_validate(reservation).model_dump(mode="json", by_alias=True)


class ReservationManager:
    """
    Validates and executes reservation bookings and status changes.

    Every status change is written together with its history row in one
    transaction. The reservation row carries a version counter, so two
    concurrent updates cannot both commit: the loser gets a Conflict instead
    of recording a previous status that was already overwritten.
    """

    def __init__(
        self,
        db: AsyncSession,
        notifier: Optional[Notifier] = None,
        strict_transitions: Optional[bool] = None,
    ):
        self.db = db
        self.notifier = notifier
        self.strict_transitions = (
            settings.strict_status_transitions if strict_transitions is None else strict_transitions
        )
        self.reservations = ReservationRepository(db)
        self.history_entries = ReservationHistoryRepository(db)
        self.tables = TableRepository(db)
        self.events = SpecialEventRepository(db)
        self.users = UserRepository(db)

    async def create(self, data: ReservationCreate, user_id: Optional[int] = None) -> Reservation:
        """Book a new reservation in `pending` status"""
        if data.date < date.today():
            raise InvalidArgument(
                "Reservation date cannot be in the past",
                errors=[{"field": "date", "message": "Date must be today or later"}],
            )

        if data.assigned_table_id is not None and await self.tables.get(data.assigned_table_id) is None:
            raise InvalidArgument(
                "Assigned table does not exist",
                errors=[{"field": "assignedTableId", "message": "Unknown table"}],
            )
        if data.special_event_id is not None and await self.events.get(data.special_event_id) is None:
            raise InvalidArgument(
                "Special event does not exist",
                errors=[{"field": "specialEventId", "message": "Unknown special event"}],
            )

        fields = data.model_dump(exclude={"end_time", "estimated_duration", "source"})
        duration = data.estimated_duration or settings.default_dining_duration_minutes

        reservation = await self.reservations.create(
            **fields,
            user_id=user_id,
            end_time=data.end_time or add_minutes(data.time, duration),
            estimated_duration=duration,
            source=data.source or "website",
            status=ReservationStatus.PENDING,
            confirmation_code=generate_confirmation_code(),
        )
        await self.history_entries.create(
            reservation_id=reservation.id,
            previous_status=ReservationStatus.PENDING,
            new_status=ReservationStatus.PENDING,
            reason=INITIAL_HISTORY_REASON,
        )
        await self.db.commit()

        logger.info(
            "Reservation created",
            reservation_id=reservation.id,
            confirmation_code=reservation.confirmation_code,
            date=reservation.date.isoformat(),
            time=reservation.time.isoformat(),
            guests=reservation.guests,
        )
        self._emit(EventType.NEW_RESERVATION, serialize_reservation(reservation))
        return reservation

    async def set_status(
        self,
        reservation_id: int,
        new_status: ReservationStatus,
        reason: Optional[str] = None,
        actor_id: Optional[int] = None,
    ) -> Reservation:
        """Move a reservation to `new_status` and append a history row"""
        try:
            new_status = ReservationStatus(new_status)
        except ValueError:
            raise InvalidArgument(
                f"Unknown reservation status: {new_status}",
                errors=[{"field": "status", "message": "Unknown status"}],
            )

        reservation = await self.reservations.get(reservation_id, fresh=True)
        if reservation is None:
            raise NotFound(f"Reservation {reservation_id} not found")

        if actor_id is not None and await self.users.get(actor_id) is None:
            raise InvalidArgument(
                "Acting user does not exist",
                errors=[{"field": "userId", "message": "Unknown user"}],
            )

        previous_status = reservation.status
        if self.strict_transitions and not can_transition(previous_status, new_status):
            raise InvalidArgument(
                f"Cannot change reservation status from {previous_status.value} to {new_status.value}",
                errors=[{"field": "status", "message": "Transition not allowed"}],
            )

        now = datetime.utcnow()
        reservation.status = new_status
        reservation.updated_at = now
        if new_status == ReservationStatus.SEATED:
            reservation.arrival_time = now
            await self._set_table_status(reservation.assigned_table_id, TableStatus.OCCUPIED)
        elif previous_status == ReservationStatus.SEATED:
            await self._set_table_status(reservation.assigned_table_id, TableStatus.AVAILABLE)
        if new_status == ReservationStatus.COMPLETED:
            reservation.departure_time = now

        self.db.add(ReservationHistory(
            reservation_id=reservation.id,
            previous_status=previous_status,
            new_status=new_status,
            changed_by_user_id=actor_id,
            reason=reason,
        ))

        try:
            await self.db.commit()
        except StaleDataError:
            await self.db.rollback()
            raise Conflict(f"Reservation {reservation_id} was modified concurrently, retry the update")

        logger.info(
            "Reservation status updated",
            reservation_id=reservation.id,
            previous_status=previous_status.value,
            new_status=new_status.value,
            actor_id=actor_id,
        )
        payload = serialize_reservation(reservation)
        payload["previousStatus"] = previous_status.value
        self._emit(EventType.RESERVATION_STATUS_UPDATED, payload)
        return reservation

    async def get(self, reservation_id: int) -> Reservation:
        reservation = await self.reservations.get(reservation_id)
        if reservation is None:
            raise NotFound(f"Reservation {reservation_id} not found")
        return reservation

    async def get_by_confirmation_code(self, code: str) -> Reservation:
        reservation = await self.reservations.get_by_confirmation_code(code.strip().upper())
        if reservation is None:
            raise NotFound(f"No reservation with confirmation code {code}")
        return reservation

    async def search(self, query: Optional[str]) -> List[Reservation]:
        query = (query or "").strip()
        if len(query) < MIN_SEARCH_LENGTH:
            raise InvalidArgument(
                f"Search query must be at least {MIN_SEARCH_LENGTH} characters",
                errors=[{"field": "q", "message": "Too short"}],
            )
        return await self.reservations.search(query)

    async def upcoming(self) -> List[Reservation]:
        return await self.reservations.list_upcoming(date.today())

    async def by_date(self, day: date) -> List[Reservation]:
        return await self.reservations.list_by_date(day)

    async def by_user(self, user_id: int) -> List[Reservation]:
        return await self.reservations.list_by_user(user_id)

    async def history(self, reservation_id: int) -> List[ReservationHistory]:
        await self.get(reservation_id)
        return await self.history_entries.list_for_reservation(reservation_id)

    async def _set_table_status(self, table_id: Optional[int], status: TableStatus) -> None:
        if table_id is None:
            return
        table = await self.tables.get(table_id)
        if table is not None:
            table.status = status
            table.updated_at = datetime.utcnow()

    def _emit(self, event_type: str, payload: dict) -> None:
        if self.notifier is not None:
            self.notifier.publish(event_type, payload)
