"""
Pydantic schemas for Reservation operations
"""
from __future__ import annotations
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator, model_validator

from app.db.models import ReservationStatus
from app.schemas.car import CarSummary
from app.schemas.user import UserSummary
from app.utils.date_utils import to_naive_utc


class ReservationCreate(BaseModel):
    """Schema for requesting a reservation"""
    car_id: int
    user_id: Optional[int] = None  # defaults to the caller
    start_date: datetime
    end_date: datetime
    total_cost: float = Field(..., ge=0)

    @field_validator("start_date", "end_date")
    @classmethod
    def normalise_timezone(cls, value: datetime) -> datetime:
        return to_naive_utc(value)

    @model_validator(mode="after")
    def check_interval(self) -> "ReservationCreate":
        if self.start_date >= self.end_date:
            raise ValueError("start_date must be before end_date")
        return self


class ReservationResponse(BaseModel):
    """Schema for reservation response"""
    id: int
    car_id: Optional[int] = None  # None once the car is deleted
    user_id: int
    start_date: datetime
    end_date: datetime
    status: ReservationStatus
    total_cost: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ReservationDetailResponse(ReservationResponse):
    """Reservation with its car and user loaded"""
    car: Optional[CarSummary] = None
    user: Optional[UserSummary] = None


class ReservationMessageResponse(BaseModel):
    message: str
    reservation: ReservationResponse


class ReservedDates(BaseModel):
    """Date range occupied by one reservation"""
    start_date: datetime
    end_date: datetime

    class Config:
        from_attributes = True


class ReconciliationResult(BaseModel):
    """Outcome counters for one reconciliation pass"""
    examined: int = 0
    completed: int = 0
    cars_released: int = 0
    failed: int = 0
