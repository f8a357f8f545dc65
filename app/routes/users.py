"""
User routes: registration, login, profiles and admin role management
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.db.models import UserRole
from app.schemas.user import (
    UserRegister,
    UserLogin,
    UserUpdate,
    UserResponse,
    UserMessageResponse,
    TokenResponse,
)
from app.services.user_service import user_service
from app.routes.dependencies import get_current_user, require_admin
from app.core.logging_config import logger

router = APIRouter(
    prefix="/api/users",
    tags=["users"]
)


@router.post("/register", response_model=UserMessageResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """
    Register a new user account

    Raises:
        HTTPException: 400 if the email or username is taken
    """
    try:
        user = user_service.register_user(db, user_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return {"message": "User registered successfully", "user": user}


@router.post("/login", response_model=TokenResponse)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Exchange email and password for a bearer token"""
    token = user_service.authenticate(db, credentials.email, credentials.password)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invalid email or password"
        )
    return {"message": "Login successful", "token": token}


@router.get("", response_model=List[UserResponse])
async def list_users(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Get all users (admin only)"""
    return user_service.get_users(db)


@router.get("/profile/{user_id}", response_model=UserResponse)
async def get_profile(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    user = user_service.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.put("/profile/{user_id}", response_model=UserMessageResponse)
async def update_profile(
    user_id: int,
    user_data: UserUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user)
):
    user = user_service.update_profile(db, user_id, user_data)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return {"message": "Profile updated successfully", "user": user}


@router.put("/grantAdmin/{user_id}", response_model=UserMessageResponse)
async def grant_admin(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Promote a user to admin (admin only)"""
    user = user_service.set_role(db, user_id, UserRole.ADMIN)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    logger.info(f"Admin {current_user['user_id']} granted admin to user {user_id}")
    return {"message": "Admin privileges granted", "user": user}


@router.put("/revokeAdmin/{user_id}", response_model=UserMessageResponse)
async def revoke_admin(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Demote an admin back to a regular user (admin only)"""
    user = user_service.set_role(db, user_id, UserRole.USER)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    logger.info(f"Admin {current_user['user_id']} revoked admin from user {user_id}")
    return {"message": "Admin privileges revoked", "user": user}
