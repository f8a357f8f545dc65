"""
Revenue statistics service
"""
from typing import List, Optional
from datetime import date, timedelta
from sqlalchemy.orm import Session
from sqlalchemy import func

from app.db.models import Statistics


class StatisticsService:
    """Service for revenue statistics queries"""

    @staticmethod
    def get_total_revenue(db: Session, day: Optional[date] = None) -> float:
        """
        Sum revenue over all statistics rows, or over a single day

        Args:
            db: Database session
            day: Restrict to rows dated within [day, day + 1)

        Returns:
            Total revenue (0 when nothing matches)
        """
        query = db.query(func.coalesce(func.sum(Statistics.revenue), 0.0))

        if day:
            query = query.filter(
                Statistics.date >= day,
                Statistics.date < day + timedelta(days=1)
            )

        return float(query.scalar() or 0.0)

    @staticmethod
    def get_statistics(db: Session) -> List[Statistics]:
        """Get all statistics rows"""
        return db.query(Statistics).order_by(Statistics.date.asc(), Statistics.id.asc()).all()

    @staticmethod
    def get_statistics_between(db: Session, start_date: date, end_date: date) -> List[Statistics]:
        """Get statistics rows dated within the inclusive range"""
        return db.query(Statistics).filter(
            Statistics.date >= start_date,
            Statistics.date <= end_date
        ).order_by(Statistics.date.asc(), Statistics.id.asc()).all()


# Global instance
statistics_service = StatisticsService()
