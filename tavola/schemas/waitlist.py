"""Waitlist schemas"""

from datetime import datetime
from typing import List, Optional
from pydantic import EmailStr, Field

from tavola.models.waitlist import WaitlistStatus
from tavola.schemas.common import APIModel, Envelope


class WaitlistCreate(APIModel):
    """Walk-in check-in request"""
    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=6, max_length=20)
    email: Optional[EmailStr] = None
    party_size: int = Field(..., ge=1, le=32767)
    estimated_wait_time: Optional[int] = Field(None, ge=0, le=32767)
    notes: Optional[str] = None


class WaitlistStatusUpdate(APIModel):
    status: WaitlistStatus


class WaitlistEntryResponse(APIModel):
    id: int
    name: str
    phone: str
    email: Optional[str]
    party_size: int
    estimated_wait_time: Optional[int]
    notification_sent: bool
    status: WaitlistStatus
    notes: Optional[str]
    check_in_time: datetime
    seated_time: Optional[datetime]
    left_time: Optional[datetime]
    created_at: datetime
    updated_at: datetime


class WaitlistEntryEnvelope(Envelope):
    message: Optional[str] = None
    entry: WaitlistEntryResponse


class WaitlistEnvelope(Envelope):
    count: int
    entries: List[WaitlistEntryResponse]
