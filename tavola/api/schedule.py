"""Time slot and special event API endpoints"""

from datetime import date as Date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from tavola.api.deps import get_availability_resolver
from tavola.database import get_db
from tavola.errors import NotFound
from tavola.repositories import SpecialEventRepository
from tavola.schemas.schedule import SpecialEventEnvelope, SpecialEventListEnvelope, TimeSlotListEnvelope
from tavola.services.availability import AvailabilityResolver
from tavola.utils.time import parse_date

time_slots_router = APIRouter()
events_router = APIRouter()


@time_slots_router.get("", response_model=TimeSlotListEnvelope)
async def list_time_slots(
    date: str = Query(...),
    party_size: int = Query(2, alias="partySize"),
    resolver: AvailabilityResolver = Depends(get_availability_resolver),
):
    """Bookable windows for the weekday of `date`"""
    slots = await resolver.available_time_slots(date, party_size)
    return TimeSlotListEnvelope(
        date=parse_date(date),
        party_size=party_size,
        count=len(slots),
        time_slots=slots,
    )


@events_router.get("", response_model=SpecialEventListEnvelope)
async def list_special_events(db: AsyncSession = Depends(get_db)):
    """Public events running today"""
    events = await SpecialEventRepository(db).list_active(Date.today())
    return SpecialEventListEnvelope(count=len(events), events=events)


@events_router.get("/{event_id}", response_model=SpecialEventEnvelope)
async def get_special_event(event_id: int, db: AsyncSession = Depends(get_db)):
    event = await SpecialEventRepository(db).get(event_id)
    if event is None:
        raise NotFound(f"Special event {event_id} not found")
    return SpecialEventEnvelope(event=event)
