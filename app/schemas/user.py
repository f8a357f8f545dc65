"""
Pydantic schemas for User operations
"""
from __future__ import annotations
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from app.db.models import UserRole


class UserRegister(BaseModel):
    """Schema for registering a user"""
    username: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)
    first_name: str
    last_name: str
    phone: str
    address: str


class UserLogin(BaseModel):
    """Schema for logging in"""
    email: EmailStr
    password: str


class UserUpdate(BaseModel):
    """Schema for updating a profile"""
    username: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class UserResponse(BaseModel):
    """Schema for user response (never includes the password hash)"""
    id: int
    username: str
    email: str
    role: UserRole
    first_name: str
    last_name: str
    phone: str
    address: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserSummary(BaseModel):
    """User fields embedded in other responses"""
    id: int
    username: str
    email: str

    class Config:
        from_attributes = True


class UserMessageResponse(BaseModel):
    message: str
    user: UserResponse


class TokenResponse(BaseModel):
    message: str
    token: str
