"""
Pydantic schemas for Car operations
"""
from __future__ import annotations
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from app.db.models import CarStatus, FuelType, TransmissionType, VehicleSize


class CarCreate(BaseModel):
    """Schema for creating a car"""
    make: str
    car_model: str
    year: str
    description: str
    daily_rate: float = Field(..., ge=0)
    status: CarStatus = CarStatus.AVAILABLE
    fuel_type: FuelType = FuelType.DIESEL
    transmission: TransmissionType
    mileage: str
    vehicle_size: VehicleSize
    image_url: Optional[str] = None


class CarUpdate(BaseModel):
    """Schema for updating a car"""
    make: Optional[str] = None
    car_model: Optional[str] = None
    year: Optional[str] = None
    description: Optional[str] = None
    daily_rate: Optional[float] = Field(None, ge=0)
    status: Optional[CarStatus] = None
    fuel_type: Optional[FuelType] = None
    transmission: Optional[TransmissionType] = None
    mileage: Optional[str] = None
    vehicle_size: Optional[VehicleSize] = None


class CarResponse(BaseModel):
    """Schema for car response"""
    id: int
    make: str
    car_model: str
    year: str
    status: CarStatus
    daily_rate: float
    image_url: Optional[str] = None
    description: str
    fuel_type: FuelType
    transmission: TransmissionType
    mileage: str
    vehicle_size: VehicleSize
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CarSummary(BaseModel):
    """Car fields embedded in other responses"""
    id: int
    make: str
    car_model: str
    image_url: Optional[str] = None

    class Config:
        from_attributes = True


class CarMessageResponse(BaseModel):
    """Message plus the affected car"""
    message: str
    car: CarResponse
