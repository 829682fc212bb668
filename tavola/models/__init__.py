"""Database models"""

from tavola.models.user import User, UserRole
from tavola.models.table import DiningArea, RestaurantTable, TableStatus
from tavola.models.schedule import SpecialEvent, TimeSlot, OperatingHours
from tavola.models.reservation import Reservation, ReservationHistory, ReservationStatus
from tavola.models.waitlist import WaitlistEntry, WaitlistStatus
from tavola.models.menu import MenuCategory, MenuItem, MenuItemType
from tavola.models.settings import RestaurantSetting

__all__ = [
    "User",
    "UserRole",
    "DiningArea",
    "RestaurantTable",
    "TableStatus",
    "SpecialEvent",
    "TimeSlot",
    "OperatingHours",
    "Reservation",
    "ReservationHistory",
    "ReservationStatus",
    "WaitlistEntry",
    "WaitlistStatus",
    "MenuCategory",
    "MenuItem",
    "MenuItemType",
    "RestaurantSetting",
]
