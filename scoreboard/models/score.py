"""Database model for score records."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class ScoreRecord(SQLModel, table=True):
    """Best-known result of one user for one game played with one control."""

    __tablename__ = "score_record"
    __table_args__ = (
        UniqueConstraint("user_id", "game_id", "control_id", name="uq_score_triple"),
    )

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: int = ORMField(index=True)
    game_id: int = ORMField(index=True)
    control_id: int = ORMField(index=True)
    score: int
    elapsed_time: float
    updated_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["ScoreRecord"]
