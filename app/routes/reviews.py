"""
Review routes for customer reviews and ratings
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.routes.dependencies import get_current_user
from app.schemas.review import ReviewCreate, ReviewUpdate, ReviewResponse, ReviewMessageResponse
from app.services.car_service import car_service
from app.services.review_service import review_service

router = APIRouter(
    prefix="/api/reviews",
    tags=["reviews"]
)


@router.post("", response_model=ReviewMessageResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    review_data: ReviewCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """
    Create a review for a car

    Args:
        review_data: Review data with car_id, rating and comment
        db: Database session
        current_user: Current authenticated user

    Returns:
        Created review
    """
    if not car_service.get_car(db, review_data.car_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Car not found"
        )

    user_id = review_data.user_id or current_user["user_id"]
    review = review_service.create_review(db, review_data, user_id)
    return {"message": "Review created successfully", "review": review}


@router.get("/car/{car_id}", response_model=List[ReviewResponse])
async def get_car_reviews(car_id: int, db: Session = Depends(get_db)):
    """Get reviews for a car, newest first"""
    return review_service.get_car_reviews(db, car_id)


@router.get("/user/{user_id}", response_model=List[ReviewResponse])
async def get_user_reviews(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    """Get reviews written by a user"""
    return review_service.get_user_reviews(db, user_id)


@router.put("/{review_id}", response_model=ReviewMessageResponse)
async def update_review(
    review_id: int,
    review_data: ReviewUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    review = review_service.update_review(db, review_id, review_data)
    if not review:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Review not found"
        )
    return {"message": "Review updated successfully", "review": review}


@router.delete("/{review_id}")
async def delete_review(
    review_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    if not review_service.delete_review(db, review_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Review not found"
        )
    return {"message": "Review deleted successfully"}
