"""
Reservation/car status reconciliation

Nothing else moves a reservation from confirmed to completed. The sweep
completes every confirmed reservation whose end date has passed and frees
its car unless another reservation on that car covers the current moment.
"""
from typing import List, Optional
from datetime import datetime
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.db.models import Car, Reservation, CarStatus, ReservationStatus
from app.schemas.reservation import ReconciliationResult
from app.core.exceptions import TransientStoreError
from app.core.logging_config import get_logger
from app.utils.date_utils import utc_now

logger = get_logger("reconciliation")


class ReconciliationService:
    """Service for the periodic reservation sweep"""

    @staticmethod
    def find_expired_reservations(db: Session, now: datetime) -> List[Reservation]:
        """Confirmed reservations that ended before now"""
        return db.query(Reservation).filter(
            Reservation.status == ReservationStatus.CONFIRMED,
            Reservation.end_date < now
        ).order_by(Reservation.end_date.asc()).all()

    @staticmethod
    def has_overlapping_reservation(
        db: Session,
        car_id: int,
        reservation_id: int,
        now: datetime
    ) -> bool:
        """
        Check whether another reservation on the car covers now

        Any status counts, including pending and cancelled.
        """
        overlapping = db.query(Reservation.id).filter(
            Reservation.car_id == car_id,
            Reservation.id != reservation_id,
            Reservation.start_date <= now,
            Reservation.end_date >= now
        ).first()
        return overlapping is not None

    @staticmethod
    def complete_reservation(
        db: Session,
        reservation_id: int,
        now: datetime
    ) -> Optional[bool]:
        """
        Complete one expired reservation and free its car if possible

        The reservation and its car are re-read under row locks, so an
        approval running at the same time is either seen or waits.

        Returns:
            True if the car was set available, False if not, None if the
            reservation was gone or no longer confirmed and was left alone
        """
        reservation = (
            db.query(Reservation)
            .filter(Reservation.id == reservation_id)
            .with_for_update()
            .populate_existing()
            .first()
        )
        if not reservation or reservation.status != ReservationStatus.CONFIRMED:
            db.rollback()
            return None

        released = False
        car = None
        if reservation.car_id is not None:
            car = (
                db.query(Car)
                .filter(Car.id == reservation.car_id)
                .with_for_update()
                .populate_existing()
                .first()
            )
        if car:
            busy = ReconciliationService.has_overlapping_reservation(
                db, car.id, reservation.id, now
            )
            if not busy and car.status != CarStatus.AVAILABLE:
                car.status = CarStatus.AVAILABLE
                released = True
        else:
            logger.warning(
                f"Car {reservation.car_id} for reservation {reservation.id} no longer exists"
            )

        reservation.status = ReservationStatus.COMPLETED
        db.commit()
        return released

    @staticmethod
    def reconcile(db: Session, now: Optional[datetime] = None) -> ReconciliationResult:
        """
        Run one reconciliation pass

        A failure on one reservation is logged and rolled back; the pass
        carries on with the rest.
        """
        now = now or utc_now()
        result = ReconciliationResult()

        try:
            expired_ids = [
                reservation.id
                for reservation in ReconciliationService.find_expired_reservations(db, now)
            ]
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Reconciliation could not load reservations: {str(e)}")
            raise TransientStoreError(f"Could not load expired reservations: {str(e)}")

        # Ids only: every commit or rollback below expires the loaded rows
        for reservation_id in expired_ids:
            result.examined += 1
            try:
                released = ReconciliationService.complete_reservation(db, reservation_id, now)
            except Exception as e:
                db.rollback()
                result.failed += 1
                logger.error(f"Error reconciling reservation {reservation_id}: {str(e)}", exc_info=True)
                continue

            if released is None:
                continue
            result.completed += 1
            if released:
                result.cars_released += 1

        if result.examined:
            logger.info(
                f"Reconciliation finished: examined={result.examined} completed={result.completed} "
                f"cars_released={result.cars_released} failed={result.failed}"
            )
        return result


# Global instance
reconciliation_service = ReconciliationService()
