"""
Car management service
"""
from typing import List, Optional
from fastapi import UploadFile
from sqlalchemy.orm import Session
from sqlalchemy import or_, and_
from sqlalchemy.exc import SQLAlchemyError

from app.db.models import Car
from app.schemas.car import CarCreate, CarUpdate
from app.core.exceptions import ValidationError
from app.core.logging_config import logger
from app.utils.s3_service import s3_service

SIMILAR_PRICE_RANGE = 50
SIMILAR_LIMIT = 5


class CarService:
    """Service for car management operations"""

    @staticmethod
    async def create_car(db: Session, car_data: CarCreate, image: Optional[UploadFile] = None) -> Car:
        """
        Create a new car

        Args:
            db: Database session
            car_data: Car creation data
            image: Optional image file

        Returns:
            Created car object
        """
        try:
            car = Car(**car_data.model_dump())
            db.add(car)
            db.commit()
            db.refresh(car)
        except SQLAlchemyError as e:
            logger.error(f"Error creating car: {str(e)}")
            db.rollback()
            raise ValidationError(f"Could not save car: {str(e)}")

        # Upload the image once the car has an id to file it under
        if image is not None and image.filename:
            car.image_url = await s3_service.upload_car_image(image, car.id)
            db.commit()
            db.refresh(car)

        logger.info(f"Car created: {car.id} - {car.make} {car.car_model}")
        return car

    @staticmethod
    def update_car(db: Session, car_id: int, car_data: CarUpdate) -> Optional[Car]:
        """
        Update an existing car

        A status edit here is an administrative override; the car row is
        locked the same way the reservation workflow locks it.
        """
        car = db.query(Car).filter(Car.id == car_id).with_for_update().populate_existing().first()
        if not car:
            return None

        for key, value in car_data.model_dump(exclude_unset=True).items():
            setattr(car, key, value)

        try:
            db.commit()
            db.refresh(car)
        except SQLAlchemyError as e:
            logger.error(f"Error updating car: {str(e)}")
            db.rollback()
            raise ValidationError(f"Could not update car: {str(e)}")

        logger.info(f"Car updated: {car.id}")
        return car

    @staticmethod
    def delete_car(db: Session, car_id: int) -> bool:
        """Delete a car; its reservations are kept with car_id cleared"""
        car = db.query(Car).filter(Car.id == car_id).first()
        if not car:
            return False

        try:
            db.delete(car)
            db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error deleting car: {str(e)}")
            db.rollback()
            raise ValidationError(f"Could not delete car: {str(e)}")

        logger.info(f"Car deleted: {car_id}")
        return True

    @staticmethod
    def get_car(db: Session, car_id: int) -> Optional[Car]:
        """Get car by ID"""
        return db.query(Car).filter(Car.id == car_id).first()

    @staticmethod
    def get_cars(db: Session) -> List[Car]:
        """Get all cars"""
        return db.query(Car).order_by(Car.id.asc()).all()

    @staticmethod
    def get_makes(db: Session) -> List[str]:
        """Get distinct car makes"""
        return [make for (make,) in db.query(Car.make).distinct().order_by(Car.make.asc()).all()]

    @staticmethod
    def search_cars(db: Session, query: str) -> List[Car]:
        """Case-insensitive search on make or model"""
        like_pattern = f"%{query}%"
        return db.query(Car).filter(
            or_(
                Car.car_model.ilike(like_pattern),
                Car.make.ilike(like_pattern)
            )
        ).all()

    @staticmethod
    def filter_cars(
        db: Session,
        make: Optional[str] = None,
        price_min: Optional[float] = None,
        price_max: Optional[float] = None
    ) -> List[Car]:
        """Filter cars by exact make and daily rate bounds"""
        query = db.query(Car)

        if make:
            query = query.filter(Car.make == make)
        if price_min is not None:
            query = query.filter(Car.daily_rate >= price_min)
        if price_max is not None:
            query = query.filter(Car.daily_rate <= price_max)

        return query.all()

    @staticmethod
    def get_similar_cars(db: Session, car: Car) -> List[Car]:
        """Other cars of the same size or with a daily rate within range"""
        return db.query(Car).filter(
            Car.id != car.id,
            or_(
                Car.vehicle_size == car.vehicle_size,
                and_(
                    Car.daily_rate >= car.daily_rate - SIMILAR_PRICE_RANGE,
                    Car.daily_rate <= car.daily_rate + SIMILAR_PRICE_RANGE
                )
            )
        ).limit(SIMILAR_LIMIT).all()


# Global instance
car_service = CarService()
