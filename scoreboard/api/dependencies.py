"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import Depends
from sqlmodel import Session

from ..core import get_session
from ..services.storage import Store


def get_store(session: Session = Depends(get_session)) -> Store:
    """Bind a :class:`Store` to the request's database session."""

    return Store(session)


__all__ = ["get_store"]
