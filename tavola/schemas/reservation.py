"""Reservation schemas"""

from datetime import date, datetime, time
from typing import Any, Dict, List, Optional
from pydantic import EmailStr, Field, field_validator

from tavola.models.reservation import ReservationStatus
from tavola.schemas.common import APIModel, Envelope


class ReservationCreate(APIModel):
    """Create reservation request"""
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=6, max_length=20)
    date: date
    time: time
    guests: int = Field(..., ge=1, le=32767)
    occasion: Optional[str] = Field(None, max_length=100)
    special_requests: Optional[str] = None
    assigned_table_id: Optional[int] = None
    special_event_id: Optional[int] = None
    end_time: Optional[time] = None
    estimated_duration: Optional[int] = Field(None, ge=15, le=600)
    source: Optional[str] = Field(None, max_length=50)
    menu_preferences: Optional[Dict[str, Any]] = None

    @field_validator("name", "phone")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("time", "end_time")
    @classmethod
    def drop_seconds_precision(cls, v: Optional[time]) -> Optional[time]:
        return v.replace(microsecond=0, tzinfo=None) if v is not None else v


class ReservationStatusUpdate(APIModel):
    """Status change request"""
    status: ReservationStatus
    reason: Optional[str] = None
    user_id: Optional[int] = None


class ReservationResponse(APIModel):
    """Reservation response"""
    id: int
    user_id: Optional[int]
    name: str
    email: str
    phone: str
    date: date
    time: time
    end_time: Optional[time]
    guests: int
    status: ReservationStatus
    special_requests: Optional[str]
    occasion: Optional[str]
    assigned_table_id: Optional[int]
    special_event_id: Optional[int]
    estimated_duration: Optional[int]
    arrival_time: Optional[datetime]
    departure_time: Optional[datetime]
    reminder_sent: bool
    confirmation_code: str
    source: Optional[str]
    menu_preferences: Optional[Dict[str, Any]]
    created_at: datetime
    updated_at: datetime


class ReservationHistoryResponse(APIModel):
    """History entry"""
    id: int
    reservation_id: int
    previous_status: ReservationStatus
    new_status: ReservationStatus
    changed_by_user_id: Optional[int]
    reason: Optional[str]
    created_at: datetime


class ReservationEnvelope(Envelope):
    message: Optional[str] = None
    reservation: ReservationResponse


class ReservationListEnvelope(Envelope):
    count: int
    reservations: List[ReservationResponse]


class ReservationHistoryEnvelope(Envelope):
    count: int
    history: List[ReservationHistoryResponse]
