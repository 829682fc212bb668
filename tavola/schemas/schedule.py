"""Time slot, special event and operating hours schemas"""

from datetime import date, datetime, time
from typing import List, Optional

from tavola.schemas.common import APIModel, Envelope


class TimeSlotResponse(APIModel):
    id: int
    start_time: time
    end_time: time
    day_of_week: int
    max_reservations: int
    is_active: bool
    special_event_id: Optional[int]


class SpecialEventResponse(APIModel):
    id: int
    name: str
    description: Optional[str]
    start_date: date
    end_date: date
    start_time: Optional[time]
    end_time: Optional[time]
    capacity: Optional[int]
    is_public: bool
    is_fully_booked: bool
    image_url: Optional[str]
    created_at: datetime
    updated_at: datetime


class OperatingHoursResponse(APIModel):
    id: int
    day_of_week: int
    open_time: time
    close_time: time
    is_closed: bool
    is_special_hours: bool
    special_date: Optional[date]
    meal_period: Optional[str]


class TimeSlotListEnvelope(Envelope):
    date: date
    party_size: int
    count: int
    time_slots: List[TimeSlotResponse]


class SpecialEventEnvelope(Envelope):
    event: SpecialEventResponse


class SpecialEventListEnvelope(Envelope):
    count: int
    events: List[SpecialEventResponse]


class OperatingHoursEnvelope(Envelope):
    count: int
    hours: List[OperatingHoursResponse]
