"""Table and time-slot availability"""

from datetime import date, time
from typing import List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from tavola.config import settings
from tavola.errors import InvalidArgument
from tavola.models.schedule import TimeSlot
from tavola.models.table import RestaurantTable
from tavola.repositories import ReservationRepository, TableRepository, TimeSlotRepository
from tavola.utils.time import day_of_week, parse_date, parse_time

logger = structlog.get_logger()


def _check_party_size(party_size: int) -> int:
    try:
        size = int(party_size)
    except (TypeError, ValueError):
        size = 0
    if size < 1:
        raise InvalidArgument(
            "Party size must be a positive integer",
            errors=[{"field": "partySize", "message": "Must be at least 1"}],
        )
    return size


class AvailabilityResolver:
    """Answers "which tables / time slots can take this party" queries"""

    def __init__(self, db: AsyncSession, capacity_slack: Optional[int] = None):
        self.tables = TableRepository(db)
        self.reservations = ReservationRepository(db)
        self.time_slots = TimeSlotRepository(db)
        self.capacity_slack = settings.table_capacity_slack if capacity_slack is None else capacity_slack

    async def available_tables(
        self,
        day: Union[str, date],
        at: Union[str, time],
        party_size: int,
    ) -> List[RestaurantTable]:
        """
        Free tables for a party at an exact date and time.

        Only tables seating between party_size and party_size + slack are
        offered, so small parties don't take large tables. Tables assigned to
        a pending or confirmed reservation at the same date and time are
        excluded. Result is ordered smallest table first.
        """
        size = _check_party_size(party_size)
        day = parse_date(day)
        at = parse_time(at)

        occupied = await self.reservations.occupied_table_ids(day, at)
        tables = await self.tables.list_fitting(
            min_capacity=size,
            max_capacity=size + self.capacity_slack,
            exclude_ids=occupied,
        )

        logger.debug(
            "Resolved available tables",
            date=day.isoformat(),
            time=at.isoformat(),
            party_size=size,
            occupied=len(occupied),
            available=len(tables),
        )
        return tables

    async def available_time_slots(self, day: Union[str, date], party_size: int = 2) -> List[TimeSlot]:
        """Active time slots for the weekday of `day`, earliest first"""
        _check_party_size(party_size)
        day = parse_date(day)
        # max_reservations is informational, bookings are not counted against it
        return await self.time_slots.list_for_day(day_of_week(day))
