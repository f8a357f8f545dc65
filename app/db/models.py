"""
Database models for the car rental application
"""
from enum import Enum as PyEnum
from sqlalchemy import (
    Column, Integer, String, Text, Float, Date, DateTime,
    ForeignKey, Enum, UniqueConstraint
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.session import Base


# Enums
class UserRole(str, PyEnum):
    """User role enumeration"""
    ADMIN = "admin"
    USER = "user"


class CarStatus(str, PyEnum):
    """Car availability status"""
    AVAILABLE = "available"
    RESERVED = "reserved"
    MAINTENANCE = "maintenance"
    RENTED = "rented"


class FuelType(str, PyEnum):
    """Fuel type enumeration"""
    ELECTRIC = "electric"
    HYBRID = "hybrid"
    DIESEL = "diesel"
    PETROL = "petrol"


class TransmissionType(str, PyEnum):
    """Transmission type enumeration"""
    AUTOMATIC = "automatic"
    MANUAL = "manual"


class VehicleSize(str, PyEnum):
    """Vehicle size enumeration"""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ReservationStatus(str, PyEnum):
    """Reservation lifecycle status"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(str, PyEnum):
    """Payment status tracked on statistics rows"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


# Models
class User(Base):
    """User account model"""
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(UserRole), default=UserRole.USER, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    address = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=True)

    # Relationships
    reservations = relationship("Reservation", back_populates="user")
    reviews = relationship("Review", back_populates="user")

    @property
    def isadmin(self) -> bool:
        return self.role == UserRole.ADMIN


class Car(Base):
    """Car model"""
    __tablename__ = 'cars'

    id = Column(Integer, primary_key=True, index=True)
    make = Column(String, nullable=False, index=True)
    car_model = Column(String, nullable=False)
    year = Column(String, nullable=False)
    status = Column(Enum(CarStatus), default=CarStatus.AVAILABLE, nullable=False)
    daily_rate = Column(Float, nullable=False)
    image_url = Column(String, nullable=True)
    description = Column(Text, nullable=False)
    fuel_type = Column(Enum(FuelType), default=FuelType.DIESEL, nullable=False)
    transmission = Column(Enum(TransmissionType), nullable=False)
    mileage = Column(String, nullable=False)
    vehicle_size = Column(Enum(VehicleSize), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=True)

    # Relationships
    reservations = relationship("Reservation", back_populates="car")
    reviews = relationship("Review", back_populates="car", cascade='all, delete-orphan')


class Reservation(Base):
    """Reservation model"""
    __tablename__ = 'reservations'

    id = Column(Integer, primary_key=True, index=True)
    # Nulled when the car is deleted; the reservation and its statistics stay
    car_id = Column(Integer, ForeignKey('cars.id', ondelete='SET NULL'), nullable=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    status = Column(Enum(ReservationStatus), default=ReservationStatus.PENDING, nullable=False, index=True)
    total_cost = Column(Float, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=True)

    # Relationships
    car = relationship("Car", back_populates="reservations")
    user = relationship("User", back_populates="reservations")


class Statistics(Base):
    """Revenue record kept alongside each live reservation"""
    __tablename__ = 'statistics'
    __table_args__ = (
        UniqueConstraint('reservation_id', name='uq_statistics_reservation_id'),
    )

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=False, index=True)
    revenue = Column(Float, nullable=False)
    payment_status = Column(Enum(PaymentStatus), nullable=False)
    reservation_id = Column(Integer, ForeignKey('reservations.id'), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=True)


class Review(Base):
    """Car review model"""
    __tablename__ = 'reviews'

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    car_id = Column(Integer, ForeignKey('cars.id'), nullable=False, index=True)
    rating = Column(Integer, nullable=False)  # 1-5
    comment = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=True)

    # Relationships
    car = relationship("Car", back_populates="reviews")
    user = relationship("User", back_populates="reviews")

    @property
    def username(self):
        return self.user.username if self.user else None
