"""Database configuration and session helpers."""

from __future__ import annotations

from typing import Any, Dict, Iterator

from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from .config import DATA_DIR, DATABASE_URL


def _engine_kwargs(url: str) -> Dict[str, Any]:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True}

    kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        # One shared connection, otherwise every checkout sees an empty database.
        kwargs["poolclass"] = StaticPool
    elif str(DATA_DIR) in parsed.database:
        DATA_DIR.mkdir(parents=True, exist_ok=True)
    return kwargs


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


__all__ = ["engine", "get_session"]
