"""Domain repositories"""

from tavola.repositories.base import Repository
from tavola.repositories.reservations import ReservationRepository, ReservationHistoryRepository
from tavola.repositories.tables import DiningAreaRepository, TableRepository
from tavola.repositories.schedule import TimeSlotRepository, SpecialEventRepository, OperatingHoursRepository
from tavola.repositories.catalog import (
    MenuCategoryRepository,
    MenuItemRepository,
    SettingRepository,
    WaitlistRepository,
    UserRepository,
)

__all__ = [
    "Repository",
    "ReservationRepository",
    "ReservationHistoryRepository",
    "DiningAreaRepository",
    "TableRepository",
    "TimeSlotRepository",
    "SpecialEventRepository",
    "OperatingHoursRepository",
    "MenuCategoryRepository",
    "MenuItemRepository",
    "SettingRepository",
    "WaitlistRepository",
    "UserRepository",
]
