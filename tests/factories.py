"""
Helpers for seeding test data directly through a session
"""
from datetime import datetime

from app.core.security import create_access_token, get_password_hash
from app.db.models import (
    User, Car, Reservation, Statistics, UserRole, CarStatus, FuelType,
    TransmissionType, VehicleSize, ReservationStatus, PaymentStatus
)


def make_user(db, username="driver", role=UserRole.USER, password="secret123"):
    user = User(
        username=username,
        email=f"{username}@example.com",
        hashed_password=get_password_hash(password),
        role=role,
        first_name=username.title(),
        last_name="Tester",
        phone="555-0100",
        address="1 Main Street"
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_car(db, **overrides):
    fields = {
        "make": "Toyota",
        "car_model": "Corolla",
        "year": "2022",
        "status": CarStatus.AVAILABLE,
        "daily_rate": 50.0,
        "description": "Compact sedan",
        "fuel_type": FuelType.PETROL,
        "transmission": TransmissionType.AUTOMATIC,
        "mileage": "12000",
        "vehicle_size": VehicleSize.MEDIUM,
    }
    fields.update(overrides)
    car = Car(**fields)
    db.add(car)
    db.commit()
    db.refresh(car)
    return car


def make_reservation(
    db,
    car,
    user,
    start=datetime(2024, 1, 1),
    end=datetime(2024, 1, 5),
    status=ReservationStatus.PENDING,
    total_cost=200.0,
    with_statistics=True
):
    reservation = Reservation(
        car_id=car.id,
        user_id=user.id,
        start_date=start,
        end_date=end,
        status=status,
        total_cost=total_cost
    )
    db.add(reservation)
    db.flush()
    if with_statistics:
        payment_status = {
            ReservationStatus.PENDING: PaymentStatus.PENDING,
            ReservationStatus.CANCELLED: PaymentStatus.CANCELLED,
        }.get(status, PaymentStatus.CONFIRMED)
        db.add(Statistics(
            date=start.date(),
            revenue=total_cost,
            payment_status=payment_status,
            reservation_id=reservation.id
        ))
    db.commit()
    db.refresh(reservation)
    return reservation


def auth_headers(user):
    token = create_access_token({"sub": str(user.id), "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


