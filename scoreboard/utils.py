"""Utility helpers for request payloads."""

from __future__ import annotations

from typing import Any, Mapping


def pick_field(payload: Mapping[str, Any], *names: str) -> Any:
    """Return the first present, non-null value among ``names``.

    Lets each endpoint accept both the English field names and the legacy
    Portuguese names sent by older clients.
    """

    for name in names:
        value = payload.get(name)
        if value is not None:
            return value
    return None


__all__ = ["pick_field"]
