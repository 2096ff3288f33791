"""Service layer helpers."""

from .rankings import TOP_N, get_top_rankings, submit_score
from .storage import Store
from .users import (
    authenticate,
    delete_user,
    get_profile,
    register_user,
    reset_password,
    update_profile,
)

__all__ = [
    "TOP_N",
    "Store",
    "authenticate",
    "delete_user",
    "get_profile",
    "get_top_rankings",
    "register_user",
    "reset_password",
    "submit_score",
    "update_profile",
]
