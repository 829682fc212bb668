"""Reservation API endpoints"""

from datetime import date as Date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from tavola.api.auth import get_optional_user, require_role
from tavola.api.deps import get_reservation_manager
from tavola.models.user import User, UserRole
from tavola.schemas.reservation import (
    ReservationCreate,
    ReservationStatusUpdate,
    ReservationEnvelope,
    ReservationListEnvelope,
    ReservationHistoryEnvelope,
)
from tavola.services.reservations import ReservationManager

router = APIRouter()


@router.post("", response_model=ReservationEnvelope, status_code=201)
async def create_reservation(
    reservation_data: ReservationCreate,
    current_user: Optional[User] = Depends(get_optional_user),
    manager: ReservationManager = Depends(get_reservation_manager),
):
    """Book a table; the response carries the confirmation code"""
    reservation = await manager.create(
        reservation_data,
        user_id=current_user.id if current_user else None,
    )
    return ReservationEnvelope(message="Reservation submitted successfully", reservation=reservation)


@router.get("", response_model=ReservationListEnvelope)
async def list_reservations_by_date(
    date: Date = Query(...),
    current_user: User = Depends(require_role(UserRole.STAFF)),
    manager: ReservationManager = Depends(get_reservation_manager),
):
    """All reservations for one day, by time (staff only)"""
    reservations = await manager.by_date(date)
    return ReservationListEnvelope(count=len(reservations), reservations=reservations)


@router.get("/search", response_model=ReservationListEnvelope)
async def search_reservations(
    q: Optional[str] = Query(None),
    manager: ReservationManager = Depends(get_reservation_manager),
):
    """Search by guest name, email, phone or confirmation code"""
    reservations = await manager.search(q)
    return ReservationListEnvelope(count=len(reservations), reservations=reservations)


@router.get("/upcoming", response_model=ReservationListEnvelope)
async def upcoming_reservations(
    manager: ReservationManager = Depends(get_reservation_manager),
):
    """Active reservations from today on"""
    reservations = await manager.upcoming()
    return ReservationListEnvelope(count=len(reservations), reservations=reservations)


@router.get("/confirm/{code}", response_model=ReservationEnvelope)
async def get_reservation_by_code(
    code: str,
    manager: ReservationManager = Depends(get_reservation_manager),
):
    """Look up a reservation by its confirmation code"""
    reservation = await manager.get_by_confirmation_code(code)
    return ReservationEnvelope(reservation=reservation)


@router.get("/{reservation_id}", response_model=ReservationEnvelope)
async def get_reservation(
    reservation_id: int,
    manager: ReservationManager = Depends(get_reservation_manager),
):
    """Get reservation details"""
    reservation = await manager.get(reservation_id)
    return ReservationEnvelope(reservation=reservation)


@router.get("/{reservation_id}/history", response_model=ReservationHistoryEnvelope)
async def get_reservation_history(
    reservation_id: int,
    manager: ReservationManager = Depends(get_reservation_manager),
):
    """Status change audit trail, oldest first"""
    history = await manager.history(reservation_id)
    return ReservationHistoryEnvelope(count=len(history), history=history)


@router.patch("/{reservation_id}/status", response_model=ReservationEnvelope)
async def update_reservation_status(
    reservation_id: int,
    status_data: ReservationStatusUpdate,
    manager: ReservationManager = Depends(get_reservation_manager),
):
    """Move a reservation through its lifecycle"""
    reservation = await manager.set_status(
        reservation_id,
        status_data.status,
        reason=status_data.reason,
        actor_id=status_data.user_id,
    )
    return ReservationEnvelope(message="Reservation status updated", reservation=reservation)
