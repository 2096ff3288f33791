"""Input coercion helpers raising :class:`ValidationError`."""

from __future__ import annotations

import math
from datetime import date
from typing import Any

from email_validator import EmailNotValidError, validate_email

from ..core.errors import ValidationError

MIN_PASSWORD_LENGTH = 8

# Signed 64-bit range of an INTEGER column.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def is_missing(value: Any) -> bool:
    """``None`` and blank strings count as missing; ``0`` does not."""

    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_text(value: Any, field: str, max_length: int | None = None) -> str:
    if is_missing(value) or not isinstance(value, str):
        raise ValidationError(f"{field} is required")
    text = value.strip()
    if max_length is not None and len(text) > max_length:
        raise ValidationError(f"{field} must be {max_length} characters or less")
    return text


def require_id(value: Any, field: str) -> int:
    """Coerce a positive integer identifier."""

    if is_missing(value):
        raise ValidationError(f"{field} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a positive integer")
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field} must be a positive integer") from None
    if not 0 < number <= INT64_MAX:
        raise ValidationError(f"{field} must be a positive integer")
    return number


def require_int(value: Any, field: str) -> int:
    if is_missing(value):
        raise ValidationError(f"{field} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"{field} must be an integer")
        number = int(value)
    else:
        try:
            number = int(str(value).strip())
        except ValueError:
            raise ValidationError(f"{field} must be an integer") from None
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValidationError(f"{field} is out of range")
    return number


def require_duration(value: Any, field: str) -> float:
    """Coerce a finite, non-negative number of seconds."""

    if is_missing(value):
        raise ValidationError(f"{field} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    try:
        number = float(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field} must be a number") from None
    if not math.isfinite(number) or number < 0:
        raise ValidationError(f"{field} must be a non-negative number")
    return number


def require_email(value: Any) -> str:
    raw = require_text(value, "Email")
    try:
        return validate_email(raw, check_deliverability=False).normalized
    except EmailNotValidError:
        raise ValidationError("Invalid email") from None


def require_password(value: Any) -> str:
    if is_missing(value) or not isinstance(value, str):
        raise ValidationError("Password is required")
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    return value


def require_date(value: Any, field: str) -> date:
    if isinstance(value, date):
        return value
    raw = require_text(value, field)
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise ValidationError(f"Invalid {field.lower()}") from None


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "MIN_PASSWORD_LENGTH",
    "is_missing",
    "require_date",
    "require_duration",
    "require_email",
    "require_id",
    "require_int",
    "require_password",
    "require_text",
]
