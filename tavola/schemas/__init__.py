"""Pydantic schemas for request/response validation"""

from tavola.schemas.common import APIModel, Envelope, ErrorResponse
from tavola.schemas.auth import Token, UserCreate, UserResponse, UserEnvelope
from tavola.schemas.reservation import (
    ReservationCreate,
    ReservationStatusUpdate,
    ReservationResponse,
    ReservationHistoryResponse,
    ReservationEnvelope,
    ReservationListEnvelope,
    ReservationHistoryEnvelope,
)
from tavola.schemas.table import (
    DiningAreaCreate,
    DiningAreaResponse,
    DiningAreaEnvelope,
    DiningAreaListEnvelope,
    TableCreate,
    TableStatusUpdate,
    TableResponse,
    TableEnvelope,
    TableListEnvelope,
)
from tavola.schemas.schedule import (
    TimeSlotResponse,
    TimeSlotListEnvelope,
    SpecialEventResponse,
    SpecialEventEnvelope,
    SpecialEventListEnvelope,
    OperatingHoursResponse,
    OperatingHoursEnvelope,
)
from tavola.schemas.waitlist import (
    WaitlistCreate,
    WaitlistStatusUpdate,
    WaitlistEntryResponse,
    WaitlistEntryEnvelope,
    WaitlistEnvelope,
)
from tavola.schemas.menu import (
    MenuCategoryResponse,
    MenuItemResponse,
    MenuCategoryListEnvelope,
    MenuItemEnvelope,
    MenuItemListEnvelope,
)
from tavola.schemas.settings import SettingUpdate, SettingResponse, SettingEnvelope, SettingListEnvelope

__all__ = [
    "APIModel",
    "Envelope",
    "ErrorResponse",
    "Token",
    "UserCreate",
    "UserResponse",
    "UserEnvelope",
    "ReservationCreate",
    "ReservationStatusUpdate",
    "ReservationResponse",
    "ReservationHistoryResponse",
    "ReservationEnvelope",
    "ReservationListEnvelope",
    "ReservationHistoryEnvelope",
    "DiningAreaCreate",
    "DiningAreaResponse",
    "DiningAreaEnvelope",
    "DiningAreaListEnvelope",
    "TableCreate",
    "TableStatusUpdate",
    "TableResponse",
    "TableEnvelope",
    "TableListEnvelope",
    "TimeSlotResponse",
    "TimeSlotListEnvelope",
    "SpecialEventResponse",
    "SpecialEventEnvelope",
    "SpecialEventListEnvelope",
    "OperatingHoursResponse",
    "OperatingHoursEnvelope",
    "WaitlistCreate",
    "WaitlistStatusUpdate",
    "WaitlistEntryResponse",
    "WaitlistEntryEnvelope",
    "WaitlistEnvelope",
    "MenuCategoryResponse",
    "MenuItemResponse",
    "MenuCategoryListEnvelope",
    "MenuItemEnvelope",
    "MenuItemListEnvelope",
    "SettingUpdate",
    "SettingResponse",
    "SettingEnvelope",
    "SettingListEnvelope",
]
