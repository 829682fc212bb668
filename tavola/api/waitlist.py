"""Waitlist API endpoints"""

from fastapi import APIRouter, Depends

from tavola.api.deps import get_waitlist_manager
from tavola.schemas.waitlist import (
    WaitlistCreate,
    WaitlistEntryEnvelope,
    WaitlistEnvelope,
    WaitlistStatusUpdate,
)
from tavola.services.waitlist import WaitlistManager

router = APIRouter()


@router.get("", response_model=WaitlistEnvelope)
async def current_waitlist(manager: WaitlistManager = Depends(get_waitlist_manager)):
    """Parties still waiting, first come first served"""
    entries = await manager.current()
    return WaitlistEnvelope(count=len(entries), entries=entries)


@router.post("", response_model=WaitlistEntryEnvelope, status_code=201)
async def add_to_waitlist(
    entry_data: WaitlistCreate,
    manager: WaitlistManager = Depends(get_waitlist_manager),
):
    """Check a walk-in party into the queue"""
    entry = await manager.add(entry_data)
    return WaitlistEntryEnvelope(message="Added to waitlist", entry=entry)


@router.patch("/{entry_id}/status", response_model=WaitlistEntryEnvelope)
async def update_waitlist_status(
    entry_id: int,
    status_data: WaitlistStatusUpdate,
    manager: WaitlistManager = Depends(get_waitlist_manager),
):
    entry = await manager.set_status(entry_id, status_data.status)
    return WaitlistEntryEnvelope(message="Waitlist status updated", entry=entry)
