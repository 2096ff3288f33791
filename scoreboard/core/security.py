"""Password hashing and verification with Argon2id."""

from __future__ import annotations

import logging

from argon2 import PasswordHasher, exceptions
from argon2.low_level import Type

from .config import ARGON2_MEMORY_COST, ARGON2_PARALLELISM, ARGON2_TIME_COST

logger = logging.getLogger(__name__)

_password_hasher = PasswordHasher(
    time_cost=ARGON2_TIME_COST,
    memory_cost=ARGON2_MEMORY_COST,
    parallelism=ARGON2_PARALLELISM,
    hash_len=32,
    type=Type.ID,
)


def hash_password(plain: str) -> str:
    """Hash a plaintext password using Argon2id."""
    return _password_hasher.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Check ``plain`` against a stored Argon2 hash; unknown formats never match."""
    if not isinstance(plain, str) or not isinstance(hashed, str) or not hashed:
        return False
    try:
        return _password_hasher.verify(hashed, plain)
    except exceptions.VerificationError:
        return False
    except exceptions.InvalidHashError:
        logger.debug("Invalid Argon2 hash format encountered during verification.")
        return False


__all__ = ["hash_password", "verify_password"]
