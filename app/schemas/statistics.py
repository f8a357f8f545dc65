"""
Pydantic schemas for revenue statistics
"""
from __future__ import annotations
import datetime as dt
from typing import Optional
from pydantic import BaseModel

from app.db.models import PaymentStatus


class StatisticsResponse(BaseModel):
    """Schema for a statistics row"""
    id: int
    date: dt.date
    revenue: float
    payment_status: PaymentStatus
    reservation_id: int
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True


class RevenueOverview(BaseModel):
    """Total revenue, optionally for a single day"""
    total_revenue: float
