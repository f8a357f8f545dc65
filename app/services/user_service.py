"""
User account service
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from app.db.models import User, UserRole
from app.schemas.user import UserRegister, UserUpdate
from app.core.security import get_password_hash, verify_password, create_access_token
from app.core.logging_config import logger


class UserService:
    """Service for registration, login and profile management"""

    @staticmethod
    def register_user(db: Session, user_data: UserRegister) -> User:
        """
        Register a new user

        Raises:
            ValueError: Email or username already taken
        """
        if db.query(User).filter(User.email == user_data.email).first():
            raise ValueError("User already exists")
        if db.query(User).filter(User.username == user_data.username).first():
            raise ValueError("Username already taken")

        user = User(
            username=user_data.username,
            email=user_data.email,
            hashed_password=get_password_hash(user_data.password),
            role=UserRole.USER,
            first_name=user_data.first_name,
            last_name=user_data.last_name,
            phone=user_data.phone,
            address=user_data.address
        )
        db.add(user)
        db.commit()
        db.refresh(user)

        logger.info(f"User registered: {user.id} - {user.username}")
        return user

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> Optional[str]:
        """Return an access token for valid credentials, None otherwise"""
        user = db.query(User).filter(User.email == email).first()
        if not user or not verify_password(password, user.hashed_password):
            logger.warning(f"Failed login attempt for {email}")
            return None

        return create_access_token({"sub": str(user.id), "role": user.role.value})

    @staticmethod
    def get_users(db: Session) -> List[User]:
        return db.query(User).order_by(User.id.asc()).all()

    @staticmethod
    def get_user(db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def update_profile(db: Session, user_id: int, user_data: UserUpdate) -> Optional[User]:
        """Update the supplied profile fields, re-hashing a new password"""
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            return None

        update_data = user_data.model_dump(exclude_unset=True, exclude_none=True)
        password = update_data.pop("password", None)
        if password:
            user.hashed_password = get_password_hash(password)

        for key, value in update_data.items():
            setattr(user, key, value)

        db.commit()
        db.refresh(user)
        logger.info(f"Profile updated: {user.id}")
        return user

    @staticmethod
    def set_role(db: Session, user_id: int, role: UserRole) -> Optional[User]:
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            return None

        user.role = role
        db.commit()
        db.refresh(user)
        logger.info(f"User {user.id} role set to {role.value}")
        return user


# Global instance
user_service = UserService()
