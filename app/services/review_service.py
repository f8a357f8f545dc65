"""
Review service
"""
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from app.db.models import Review
from app.schemas.review import ReviewCreate, ReviewUpdate
from app.core.logging_config import logger


class ReviewService:
    """Service for car reviews"""

    @staticmethod
    def create_review(db: Session, review_data: ReviewCreate, user_id: int) -> Review:
        try:
            review = Review(
                user_id=user_id,
                car_id=review_data.car_id,
                rating=review_data.rating,
                comment=review_data.comment
            )
            db.add(review)
            db.commit()
            db.refresh(review)
        except Exception as e:
            logger.error(f"Error creating review: {str(e)}")
            db.rollback()
            raise

        logger.info(f"Review created: {review.id} for car {review.car_id} by user {user_id}")
        return review

    @staticmethod
    def get_car_reviews(db: Session, car_id: int) -> List[Review]:
        return db.query(Review).options(joinedload(Review.user)).filter(
            Review.car_id == car_id
        ).order_by(Review.created_at.desc(), Review.id.desc()).all()

    @staticmethod
    def get_user_reviews(db: Session, user_id: int) -> List[Review]:
        return db.query(Review).options(joinedload(Review.car)).filter(
            Review.user_id == user_id
        ).order_by(Review.created_at.desc(), Review.id.desc()).all()

    @staticmethod
    def update_review(db: Session, review_id: int, review_data: ReviewUpdate) -> Optional[Review]:
        review = db.query(Review).filter(Review.id == review_id).first()
        if not review:
            return None

        for key, value in review_data.model_dump(exclude_unset=True).items():
            setattr(review, key, value)

        db.commit()
        db.refresh(review)
        return review

    @staticmethod
    def delete_review(db: Session, review_id: int) -> bool:
        review = db.query(Review).filter(Review.id == review_id).first()
        if not review:
            return False

        db.delete(review)
        db.commit()
        logger.info(f"Review deleted: {review_id}")
        return True


# Global instance
review_service = ReviewService()
