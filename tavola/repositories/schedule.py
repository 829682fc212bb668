"""Time slot, special event and operating hours repositories"""

from datetime import date
from typing import List

from tavola.models.schedule import OperatingHours, SpecialEvent, TimeSlot
from tavola.repositories.base import Repository


class TimeSlotRepository(Repository[TimeSlot]):
    model = TimeSlot

    async def list_for_day(self, day_of_week: int) -> List[TimeSlot]:
        return await self.list(
            TimeSlot.day_of_week == day_of_week,
            TimeSlot.is_active == True,  # noqa: E712
            order_by=[TimeSlot.start_time.asc()],
        )


class SpecialEventRepository(Repository[SpecialEvent]):
    model = SpecialEvent

    async def list_active(self, today: date) -> List[SpecialEvent]:
        """Public events whose date range covers today"""
        return await self.list(
            SpecialEvent.start_date <= today,
            SpecialEvent.end_date >= today,
            SpecialEvent.is_public == True,  # noqa: E712
            order_by=[SpecialEvent.start_date.asc()],
        )


class OperatingHoursRepository(Repository[OperatingHours]):
    model = OperatingHours

    async def list_all(self) -> List[OperatingHours]:
        return await self.list(order_by=[OperatingHours.day_of_week.asc(), OperatingHours.open_time.asc()])
