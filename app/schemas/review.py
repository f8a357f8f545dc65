"""
Pydantic schemas for Review operations
"""
from __future__ import annotations
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from app.schemas.car import CarSummary


class ReviewCreate(BaseModel):
    """Schema for creating a review"""
    car_id: int
    user_id: Optional[int] = None  # defaults to the caller
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: str


class ReviewUpdate(BaseModel):
    """Schema for editing a review"""
    rating: Optional[int] = Field(None, ge=1, le=5)
    comment: Optional[str] = None


class ReviewResponse(BaseModel):
    """Schema for review response"""
    id: int
    user_id: int
    car_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # Reviewer details (populated on car listings)
    username: Optional[str] = None
    # Car details (populated on user listings)
    car: Optional[CarSummary] = None

    class Config:
        from_attributes = True


class ReviewMessageResponse(BaseModel):
    message: str
    review: ReviewResponse
