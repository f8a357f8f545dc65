"""
Revenue statistics routes
"""
from typing import List, Optional
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.statistics import StatisticsResponse, RevenueOverview
from app.services.statistics_service import statistics_service
from app.routes.dependencies import get_current_user

router = APIRouter(
    prefix="/api/statistics",
    tags=["statistics"]
)


@router.get("/overview", response_model=RevenueOverview)
async def get_overview(
    day: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Total revenue, for one day when `date` is given"""
    return {"total_revenue": statistics_service.get_total_revenue(db, day)}


@router.get("", response_model=List[StatisticsResponse])
async def list_statistics(db: Session = Depends(get_db)):
    """Get all statistics rows"""
    return statistics_service.get_statistics(db)


@router.get("/date", response_model=List[StatisticsResponse])
async def get_statistics_by_date(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db)
):
    """Get statistics rows within an inclusive date range"""
    if not start_date or not end_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Start date and end date are required"
        )
    return statistics_service.get_statistics_between(db, start_date, end_date)
