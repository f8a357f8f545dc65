"""
Logging configuration

Everything logs through the "app" logger (or a child of it) to stdout, plus a
size-rotated file when LOG_FILE is set.
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional
from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"

# Third-party loggers and the level they are held at
QUIET_LOGGERS = {
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "boto3": logging.WARNING,
    "botocore": logging.WARNING,
    "apscheduler": logging.WARNING,
}


def resolve_log_path(log_file: str) -> Path:
    """Relative paths are taken from the project root"""
    log_path = Path(log_file)
    if not log_path.is_absolute():
        log_path = Path(__file__).parent.parent.parent / log_path
    return log_path.resolve()


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5
) -> None:
    """
    Configure the root logger

    Args:
        log_level: Logging level name
        log_file: Optional file path for rotated log output
        max_bytes: Rotate the file once it reaches this size
        backup_count: Rotated files to keep
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(getattr(h, "_carrental_stdout", False) for h in root_logger.handlers):
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        stream_handler._carrental_stdout = True
        root_logger.addHandler(stream_handler)

    if log_file:
        log_path = resolve_log_path(log_file)
        already_attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == str(log_path)
            for h in root_logger.handlers
        )
        if not already_attached:
            try:
                log_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = RotatingFileHandler(
                    str(log_path), maxBytes=max_bytes, backupCount=backup_count
                )
            except OSError as e:
                root_logger.warning(f"File logging disabled ({log_path}): {e}")
            else:
                file_handler.setLevel(level)
                file_handler.setFormatter(formatter)
                root_logger.addHandler(file_handler)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, e.g. get_logger("scheduler") -> app.scheduler"""
    if name == "app" or name.startswith("app."):
        return logging.getLogger(name)
    return logging.getLogger(f"app.{name}")


# File logging is skipped in debug runs and on hosts with ephemeral disks
setup_logging(
    log_level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
    log_file=settings.LOG_FILE if (settings.LOG_FILE and not settings.DEBUG and os.getenv("RENDER") is None) else None
)

logger = get_logger("app")
