"""Reservation and reservation history repositories"""

from datetime import date, time
from typing import List, Optional, Set

from sqlalchemy import select, or_

from tavola.models.reservation import (
    Reservation,
    ReservationHistory,
    ReservationStatus,
    OCCUPYING_STATUSES,
    TERMINAL_STATUSES,
)
from tavola.repositories.base import Repository

SEARCH_LIMIT = 50
UPCOMING_LIMIT = 100


class ReservationRepository(Repository[Reservation]):
    model = Reservation

    async def get_by_confirmation_code(self, code: str) -> Optional[Reservation]:
        return await self.first(Reservation.confirmation_code == code)

    async def list_by_date(self, day: date) -> List[Reservation]:
        return await self.list(Reservation.date == day, order_by=[Reservation.time.asc()])

    async def list_by_user(self, user_id: int) -> List[Reservation]:
        return await self.list(
            Reservation.user_id == user_id,
            order_by=[Reservation.date.desc(), Reservation.time.asc()],
        )

    async def list_upcoming(self, today: date) -> List[Reservation]:
        return await self.list(
            Reservation.date >= today,
            Reservation.status.notin_(TERMINAL_STATUSES),
            order_by=[Reservation.date.asc(), Reservation.time.asc()],
            limit=UPCOMING_LIMIT,
        )

    async def search(self, query: str) -> List[Reservation]:
        """Case-insensitive substring match on guest contact fields and code"""
        escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        term = f"%{escaped}%"
        return await self.list(
            or_(
                Reservation.name.ilike(term, escape="\\"),
                Reservation.email.ilike(term, escape="\\"),
                Reservation.phone.ilike(term, escape="\\"),
                Reservation.confirmation_code.ilike(term, escape="\\"),
            ),
            order_by=[Reservation.date.desc(), Reservation.time.desc()],
            limit=SEARCH_LIMIT,
        )

    async def occupied_table_ids(self, day: date, at: time) -> Set[int]:
        """Tables held by pending/confirmed reservations at exactly this date and time"""
        result = await self.db.execute(
            select(Reservation.assigned_table_id).where(
                Reservation.date == day,
                Reservation.time == at,
                Reservation.status.in_(OCCUPYING_STATUSES),
                Reservation.assigned_table_id.is_not(None),
            )
        )
        return set(result.scalars().all())

    async def list_due_for_reminder(self, days: List[date]) -> List[Reservation]:
        return await self.list(
            Reservation.date.in_(days),
            Reservation.status == ReservationStatus.CONFIRMED,
            Reservation.reminder_sent == False,  # noqa: E712
            order_by=[Reservation.date.asc(), Reservation.time.asc()],
        )


class ReservationHistoryRepository(Repository[ReservationHistory]):
    model = ReservationHistory

    async def list_for_reservation(self, reservation_id: int) -> List[ReservationHistory]:
        return await self.list(
            ReservationHistory.reservation_id == reservation_id,
            order_by=[ReservationHistory.created_at.asc(), ReservationHistory.id.asc()],
        )
