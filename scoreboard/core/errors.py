"""Error taxonomy shared by services and the HTTP layer."""

from __future__ import annotations


class ScoreboardError(Exception):
    """Base class for errors surfaced to API clients as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ScoreboardError):
    """Required input is missing or malformed."""

    status_code = 400


class AuthenticationError(ScoreboardError):
    status_code = 401


class UserNotFoundError(ScoreboardError):
    status_code = 404


class StorageError(ScoreboardError):
    """The backing store failed to read or write."""

    status_code = 500


__all__ = [
    "AuthenticationError",
    "ScoreboardError",
    "StorageError",
    "UserNotFoundError",
    "ValidationError",
]
