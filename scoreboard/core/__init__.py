"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    HOST,
    LOG_LEVEL,
    PORT,
    UNKNOWN_PLAYER_NAME,
)
from .database import engine, get_session
from .errors import (
    AuthenticationError,
    ScoreboardError,
    StorageError,
    UserNotFoundError,
    ValidationError,
)
from .logging import configure_logging
from .time import utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_RESET",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "UNKNOWN_PLAYER_NAME",
    "AuthenticationError",
    "ScoreboardError",
    "StorageError",
    "UserNotFoundError",
    "ValidationError",
    "configure_logging",
    "engine",
    "get_session",
    "utcnow",
]
