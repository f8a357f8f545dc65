"""
Database session management
"""
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from app.core.config import settings
from app.core.logging_config import logger

connect_args = {}
engine_args = {
    "pool_pre_ping": True,
    "echo": settings.DEBUG
}

if "sqlite" in settings.DATABASE_URL:
    connect_args["check_same_thread"] = False
else:
    engine_args["pool_size"] = 10
    engine_args["max_overflow"] = 20

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    **engine_args
)

# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base class for models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database session

    Yields:
        Database session
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception as e:
        logger.error(f"Database session error: {str(e)}")
        db.rollback()
        raise
    finally:
        db.close()


def seed_default_admin(db: Session) -> None:
    """Create the default admin account if no user holds that username"""
    from app.db.models import User, UserRole
    from app.core.security import get_password_hash

    admin = db.query(User).filter(User.username == settings.DEFAULT_ADMIN_USERNAME).first()
    if admin:
        return

    admin = User(
        username=settings.DEFAULT_ADMIN_USERNAME,
        email=settings.DEFAULT_ADMIN_EMAIL,
        hashed_password=get_password_hash(settings.DEFAULT_ADMIN_PASSWORD),
        role=UserRole.ADMIN,
        first_name="Admin",
        last_name="User",
        phone="",
        address=""
    )
    db.add(admin)
    db.commit()
    logger.info(f"Default admin user created ({settings.DEFAULT_ADMIN_USERNAME})")


def init_db() -> None:
    """Initialize database tables"""
    from app.db import models  # noqa: F401 - registers models on Base

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_default_admin(db)
        logger.info("Database initialized successfully")
    except SQLAlchemyError as e:
        logger.error(f"Error initializing database: {str(e)}")
        db.rollback()
        raise
    finally:
        db.close()
