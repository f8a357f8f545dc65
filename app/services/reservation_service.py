"""
Reservation lifecycle service

A reservation, its statistics row and its car's status move together:
creation writes the reservation and a pending statistics row, approval
confirms both and reserves the car, rejection deletes both. Each operation
runs in one transaction.
"""
from typing import List, Optional
from datetime import datetime
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import SQLAlchemyError

from app.db.models import (
    Car, Reservation, Statistics, CarStatus, ReservationStatus, PaymentStatus
)
from app.schemas.reservation import ReservationCreate, ReservationResponse
from app.core.exceptions import NotFoundError, InvalidStateError, ValidationError, TransientStoreError
from app.core.logging_config import logger
from app.utils.date_utils import utc_now


class ReservationService:
    """Service for the reservation approval workflow"""

    @staticmethod
    def create_reservation(
        db: Session,
        reservation_data: ReservationCreate,
        user_id: int
    ) -> Reservation:
        """
        Create a pending reservation and its statistics row

        Args:
            db: Database session
            reservation_data: Requested car, interval and cost
            user_id: Owner of the reservation

        Returns:
            Created reservation

        Raises:
            NotFoundError: Car does not exist
            ValidationError: Either row could not be persisted
        """
        car = db.query(Car).filter(Car.id == reservation_data.car_id).first()
        if not car:
            raise NotFoundError("Car not found!")

        try:
            reservation = Reservation(
                car_id=reservation_data.car_id,
                user_id=user_id,
                start_date=reservation_data.start_date,
                end_date=reservation_data.end_date,
                status=ReservationStatus.PENDING,
                total_cost=reservation_data.total_cost
            )
            db.add(reservation)
            db.flush()  # assigns reservation.id

            statistics = Statistics(
                date=reservation.start_date.date(),
                revenue=reservation.total_cost,
                payment_status=PaymentStatus.PENDING,
                reservation_id=reservation.id
            )
            db.add(statistics)
            db.commit()
            db.refresh(reservation)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating reservation for car {reservation_data.car_id}: {str(e)}")
            raise ValidationError(f"Could not save reservation: {str(e)}")

        logger.info(
            f"Reservation created: {reservation.id} (car {reservation.car_id}, "
            f"user {user_id}), awaiting approval"
        )
        return reservation

    @staticmethod
    def approve_reservation(db: Session, reservation_id: int) -> Reservation:
        """
        Confirm a pending reservation and reserve its car

        The reservation and car rows are locked until commit so the sweep
        and other approvals see the new status, not a stale one.

        Raises:
            NotFoundError: Reservation or car missing
            InvalidStateError: Reservation not pending or car not available
        """
        reservation = (
            db.query(Reservation)
            .filter(Reservation.id == reservation_id)
            .with_for_update()
            .populate_existing()
            .first()
        )
        if not reservation:
            raise NotFoundError("Reservation not found")
        if reservation.status != ReservationStatus.PENDING:
            raise InvalidStateError("Only pending reservations can be approved")

        # Lock the car row to prevent simultaneous status changes for the same car
        car = (
            db.query(Car)
            .filter(Car.id == reservation.car_id)
            .with_for_update()
            .populate_existing()
            .first()
        )
        if not car:
            raise NotFoundError("Car not found!")
        if car.status != CarStatus.AVAILABLE:
            raise InvalidStateError("Car is not available!")

        try:
            reservation.status = ReservationStatus.CONFIRMED

            statistics = db.query(Statistics).filter(
                Statistics.reservation_id == reservation.id
            ).first()
            if statistics:
                statistics.payment_status = PaymentStatus.CONFIRMED
            else:
                logger.warning(
                    f"Data integrity: no statistics row for reservation {reservation.id}, "
                    f"approving without it"
                )

            car.status = CarStatus.RESERVED
            db.commit()
            db.refresh(reservation)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error approving reservation {reservation_id}: {str(e)}")
            raise TransientStoreError(f"Could not approve reservation: {str(e)}")

        logger.info(f"Reservation approved: {reservation.id}, car {reservation.car_id} reserved")
        return reservation

    @staticmethod
    def reject_reservation(db: Session, reservation_id: int) -> ReservationResponse:
        """
        Reject a pending reservation, deleting it and its statistics row

        The returned snapshot carries status=cancelled; nothing with that
        status is persisted.

        Raises:
            NotFoundError: Reservation missing or not pending, or its
                statistics row is missing
        """
        reservation = db.query(Reservation).filter(
            Reservation.id == reservation_id,
            Reservation.status == ReservationStatus.PENDING
        ).with_for_update().populate_existing().first()
        if not reservation:
            raise NotFoundError("Pending reservation not found")

        statistics = db.query(Statistics).filter(
            Statistics.reservation_id == reservation.id
        ).first()
        if not statistics:
            logger.warning(
                f"Data integrity: no statistics row for reservation {reservation.id}, "
                f"rejection refused"
            )
            raise NotFoundError("No statistics found for this reservation")

        try:
            reservation.status = ReservationStatus.CANCELLED
            rejected = ReservationResponse.model_validate(reservation)

            db.delete(statistics)
            db.delete(reservation)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error rejecting reservation {reservation_id}: {str(e)}")
            raise TransientStoreError(f"Could not reject reservation: {str(e)}")

        logger.info(f"Reservation rejected and removed: {reservation_id}")
        return rejected

    @staticmethod
    def list_reservations(db: Session) -> List[Reservation]:
        """Get all reservations with car and user loaded"""
        return db.query(Reservation).options(
            joinedload(Reservation.car),
            joinedload(Reservation.user)
        ).order_by(Reservation.created_at.desc(), Reservation.id.desc()).all()

    @staticmethod
    def get_ongoing_reservations(db: Session, now: Optional[datetime] = None) -> List[Reservation]:
        """Get confirmed reservations whose interval covers now"""
        now = now or utc_now()
        return db.query(Reservation).options(
            joinedload(Reservation.car),
            joinedload(Reservation.user)
        ).filter(
            Reservation.status == ReservationStatus.CONFIRMED,
            Reservation.start_date <= now,
            Reservation.end_date >= now
        ).all()

    @staticmethod
    def get_reserved_dates(db: Session, car_id: int) -> List[Reservation]:
        """Get every reservation interval for a car, any status"""
        return db.query(Reservation).filter(
            Reservation.car_id == car_id
        ).order_by(Reservation.start_date.asc()).all()

    @staticmethod
    def get_user_reservations(db: Session, user_id: int) -> List[Reservation]:
        """Get all reservations made by a user"""
        return db.query(Reservation).options(
            joinedload(Reservation.car),
            joinedload(Reservation.user)
        ).filter(
            Reservation.user_id == user_id
        ).order_by(Reservation.start_date.desc()).all()

    @staticmethod
    def get_reservation(db: Session, reservation_id: int) -> Reservation:
        """Get reservation by ID"""
        reservation = db.query(Reservation).options(
            joinedload(Reservation.car),
            joinedload(Reservation.user)
        ).filter(Reservation.id == reservation_id).first()
        if not reservation:
            raise NotFoundError("Reservation not found")
        return reservation


# Global instance
reservation_service = ReservationService()
