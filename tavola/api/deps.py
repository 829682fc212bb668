"""Request-scoped service dependencies"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tavola.database import get_db
from tavola.services.availability import AvailabilityResolver
from tavola.services.notifier import Notifier
from tavola.services.reservations import ReservationManager
from tavola.services.waitlist import WaitlistManager


def get_notifier(request: Request) -> Notifier:
    """The process-wide notifier created with the application"""
    return request.app.state.notifier


def get_reservation_manager(
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
) -> ReservationManager:
    return ReservationManager(db, notifier)


def get_availability_resolver(db: AsyncSession = Depends(get_db)) -> AvailabilityResolver:
    return AvailabilityResolver(db)


def get_waitlist_manager(
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
) -> WaitlistManager:
    return WaitlistManager(db, notifier)
