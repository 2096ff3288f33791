"""Database model exports."""

from .score import ScoreRecord
from .user import User, UserControl

__all__ = [
    "ScoreRecord",
    "User",
    "UserControl",
]
