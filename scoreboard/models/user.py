"""Database models for player accounts."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class User(SQLModel, table=True):
    """Registered player identified by a unique display name and email."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str = ORMField(index=True, unique=True)
    email: str = ORMField(index=True, unique=True)
    password_hash: str
    birth_date: date
    created_at: datetime = ORMField(default_factory=utcnow)


class UserControl(SQLModel, table=True):
    """Input device a player registered with."""

    __tablename__ = "user_control"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: int = ORMField(index=True, unique=True)
    control_id: int


__all__ = ["User", "UserControl"]
