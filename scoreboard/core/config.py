"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Database -------------------------------------------------------------------
DATA_DIR = _PROJECT_ROOT / "data"
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{DATA_DIR / 'app.db'}"
DB_RESET = _env_bool("DB_RESET", False)


# CORS -----------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_deployed_origins = [
    "https://startai.vercel.app",
    "https://startai-startai-ais-projects.vercel.app",
]

_local_dev_origins = [
    "http://localhost:4200",
    "http://127.0.0.1:4200",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_deployed_origins,
        *_local_dev_origins,
    ]
)


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
UNKNOWN_PLAYER_NAME = os.getenv("UNKNOWN_PLAYER_NAME") or "Desconhecido"

HOST = os.getenv("HOST", "127.0.0.1")
PORT = _env_int("PORT", 3000)


# Password hashing -----------------------------------------------------------
ARGON2_TIME_COST = _env_int("ARGON2_TIME_COST", 2)
ARGON2_MEMORY_COST = _env_int("ARGON2_MEMORY_COST", 19456)
ARGON2_PARALLELISM = _env_int("ARGON2_PARALLELISM", 1)


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "ARGON2_MEMORY_COST",
    "ARGON2_PARALLELISM",
    "ARGON2_TIME_COST",
    "DATABASE_URL",
    "DATA_DIR",
    "DB_RESET",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "UNKNOWN_PLAYER_NAME",
]
