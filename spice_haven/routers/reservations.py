"""
Reservations router.

Guests submit reservations through the public form; listing, viewing and
changing status are staff-only.
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from spice_haven.core.deps import get_current_user
from spice_haven.db.session import get_store
from spice_haven.db.store import DataStore
from spice_haven.schemas.auth import User
from spice_haven.schemas.reservation import (
    Reservation,
    ReservationCreate,
    ReservationStatus,
    ReservationStatusUpdate,
    ReservationSummary,
)
from spice_haven.services.reservation_lifecycle import InvalidStatusTransitionError

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.get("", response_model=List[Reservation])
def list_reservations(
    status_filter: Optional[ReservationStatus] = Query(None, alias="status", description="Only this status"),
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """
    List reservations, newest first.
    """
    if status_filter:
        reservations = store.reservations.by_status(status_filter)
    else:
        reservations = store.reservations.get_all()
    return sorted(reservations, key=lambda r: (r.created_at, r.id), reverse=True)


@router.get("/summary", response_model=ReservationSummary)
def get_reservation_summary(
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Counts for the admin dashboard: per status, today, and upcoming."""
    return store.reservations.summary(date.today())


@router.get("/{reservation_id}", response_model=Reservation)
def get_reservation(
    reservation_id: int,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    reservation = store.reservations.get_by_id(reservation_id)
    if not reservation:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")
    return reservation


@router.post("", response_model=Reservation, status_code=status.HTTP_201_CREATED)
def create_reservation(
    reservation: ReservationCreate,
    store: DataStore = Depends(get_store),
):
    """
    Submit a reservation request.

    Public endpoint. The reservation always starts as pending.
    """
    return store.reservations.create(reservation)


@router.put("/{reservation_id}/status", response_model=Reservation)
def update_reservation_status(
    reservation_id: int,
    update: ReservationStatusUpdate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """
    Confirm or cancel a reservation.

    pending -> confirmed | cancelled, confirmed -> cancelled. Cancelled
    reservations can't be reopened.
    """
    try:
        reservation = store.reservations.set_status(reservation_id, update.status)
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    if not reservation:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")
    return reservation
