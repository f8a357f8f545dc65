"""
Application configuration and settings management
"""
import os
from typing import Optional
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "CarRental"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"

    # Database
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./carrental.db"
    ).replace("postgres://", "postgresql://", 1)

    # Authentication
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me-in-production-3f9a1c7e5b2d4f6a8c0e1b3d5f7a9c2e")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Seeded on first start
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_EMAIL: str = "admin@carrental.io"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"

    # AWS S3
    AWS_REGION: str = os.getenv("AWS_REGION", "us-east-1")
    AWS_ACCESS_KEY_ID: Optional[str] = os.getenv("AWS_ACCESS_KEY_ID")
    AWS_SECRET_ACCESS_KEY: Optional[str] = os.getenv("AWS_SECRET_ACCESS_KEY")
    S3_BUCKET_NAME: str = os.getenv("S3_BUCKET_NAME", "carrental")

    # File Upload
    UPLOAD_DIR: str = "static/uploads"
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB

    # Reconciliation job
    ENABLE_SCHEDULER: bool = True
    RECONCILIATION_CRON: str = "0 * * * *"  # hourly
    SCHEDULER_TIMEZONE: str = "UTC"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "logs/app.log"

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore"
    }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance with placeholder filtering"""
    s = Settings()
    placeholders = ["XXXX", "your-", "replace-"]

    def is_placeholder(val: Optional[str]) -> bool:
        if not val:
            return True
        return any(p in val for p in placeholders) or any(p in val.lower() for p in placeholders)

    if is_placeholder(s.AWS_ACCESS_KEY_ID):
        s.AWS_ACCESS_KEY_ID = None
    if is_placeholder(s.AWS_SECRET_ACCESS_KEY):
        s.AWS_SECRET_ACCESS_KEY = None

    return s


# Global settings instance
settings = get_settings()
