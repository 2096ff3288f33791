"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from ...services.rankings import TOP_N

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {"ranking_size": TOP_N}


__all__ = ["router"]
