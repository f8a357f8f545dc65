"""
Reservation routes: requests, admin approval workflow and lookups
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.reservation import (
    ReservationCreate,
    ReservationDetailResponse,
    ReservationMessageResponse,
    ReservedDates,
)
from app.services.reservation_service import reservation_service
from app.routes.dependencies import get_current_user, require_admin

router = APIRouter(
    prefix="/api/reservations",
    tags=["reservations"]
)


@router.post("", response_model=ReservationMessageResponse, status_code=status.HTTP_201_CREATED)
def create_reservation(
    reservation_data: ReservationCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Request a car; the reservation waits for admin approval"""
    user_id = reservation_data.user_id or current_user["user_id"]
    reservation = reservation_service.create_reservation(db, reservation_data, user_id)
    return {
        "message": "Reservation request created successfully. Waiting for admin approval.",
        "reservation": reservation
    }


@router.patch("/{reservation_id}/approve", response_model=ReservationMessageResponse)
def approve_reservation(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Approve a pending reservation (admin only)"""
    reservation = reservation_service.approve_reservation(db, reservation_id)
    return {"message": "Reservation approved successfully", "reservation": reservation}


@router.patch("/{reservation_id}/reject", response_model=ReservationMessageResponse)
def reject_reservation(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Reject a pending reservation (admin only)"""
    reservation = reservation_service.reject_reservation(db, reservation_id)
    return {"message": "Reservation rejected successfully", "reservation": reservation}


@router.get("", response_model=List[ReservationDetailResponse])
def list_reservations(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Get all reservations (admin only)"""
    return reservation_service.list_reservations(db)


@router.get("/ongoing", response_model=List[ReservationDetailResponse])
def get_ongoing_reservations(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Get confirmed reservations running right now (admin only)"""
    return reservation_service.get_ongoing_reservations(db)


@router.get("/getReservedDates/{car_id}", response_model=List[ReservedDates])
def get_reserved_dates(
    car_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Get every reserved date range for a car"""
    return reservation_service.get_reserved_dates(db, car_id)


@router.get("/myReservations/{user_id}", response_model=List[ReservationDetailResponse])
def get_user_reservations(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Get all reservations of a user"""
    # TODO: restrict to the caller's own reservations unless admin; clients currently rely on reading any user's list
    return reservation_service.get_user_reservations(db, user_id)


@router.get("/{reservation_id}", response_model=ReservationDetailResponse)
def get_reservation(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Get a single reservation by ID"""
    return reservation_service.get_reservation(db, reservation_id)
