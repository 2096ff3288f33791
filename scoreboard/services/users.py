"""Account registration, login and profile maintenance."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from ..core.errors import AuthenticationError, UserNotFoundError, ValidationError
from ..core.security import hash_password, verify_password
from ..models import ScoreRecord, User, UserControl
from .storage import DuplicateRecordError, Store
from .validation import (
    is_missing,
    require_date,
    require_email,
    require_id,
    require_password,
    require_text,
)

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 40


def user_to_dict(user: User) -> Dict[str, Any]:
    """Public view of a user; the password hash is never included."""

    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "birthDate": user.birth_date.isoformat(),
        "createdAt": user.created_at.isoformat() if user.created_at else None,
    }


def _ensure_available(store: Store, name: str, email: str, exclude_id: Optional[int] = None) -> None:
    if store.find(User, name=name, exclude_id=exclude_id, limit=1):
        raise ValidationError("This user name is already taken.")
    if store.find(User, email=email, exclude_id=exclude_id, limit=1):
        raise ValidationError("A user with this email already exists.")


def _control_id_for(store: Store, user_id: int) -> Optional[int]:
    control = store.find_one(UserControl, user_id=user_id)
    return control.control_id if control else None


def _require_user(store: Store, user_id: Any) -> User:
    user = store.find_one(User, id=require_id(user_id, "User id"))
    if user is None:
        raise UserNotFoundError("User not found.")
    return user


def register_user(
    store: Store,
    name: Any,
    email: Any,
    password: Any,
    birth_date: Any,
    control_id: Any,
) -> User:
    """Create a user together with the control they play with."""

    name = require_text(name, "User name", MAX_NAME_LENGTH)
    email = require_email(email)
    password = require_password(password)
    birth_date = require_date(birth_date, "Birth date")
    control_id = require_id(control_id, "Control")

    _ensure_available(store, name, email)

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        birth_date=birth_date,
    )
    try:
        store.stage(user)
        store.stage(UserControl(user_id=user.id, control_id=control_id))
        store.commit()
    except DuplicateRecordError:
        raise ValidationError("User name or email is already in use.") from None

    logger.info("Registered user %s", user.id)
    return user


def authenticate(store: Store, email: Any, password: Any) -> Tuple[User, Optional[int]]:
    if is_missing(email) or is_missing(password):
        raise ValidationError("Email and password are required.")

    user = store.find_one(User, email=require_email(email))
    if user is None:
        raise ValidationError("Email not registered.")
    if not verify_password(password, user.password_hash):
        raise AuthenticationError("Invalid credentials.")
    return user, _control_id_for(store, user.id)


def reset_password(store: Store, email: Any, password: Any, birth_date: Any) -> None:
    """Replace a password after confirming the account's birth date."""

    if is_missing(email) or is_missing(password) or is_missing(birth_date):
        raise ValidationError("All fields are required.")

    user = store.find_one(User, email=require_email(email))
    if user is None:
        raise UserNotFoundError("User not found.")
    if user.birth_date != require_date(birth_date, "Birth date"):
        raise ValidationError("Invalid birth date.")

    store.update(user, password_hash=hash_password(require_password(password)))
    logger.info("Password reset for user %s", user.id)


def get_profile(store: Store, user_id: Any) -> Tuple[User, Optional[int]]:
    user = _require_user(store, user_id)
    return user, _control_id_for(store, user.id)


def update_profile(
    store: Store,
    user_id: Any,
    name: Any,
    email: Any,
    birth_date: Any,
    control_id: Any,
) -> Tuple[User, int]:
    if any(is_missing(value) for value in (name, email, birth_date, control_id)):
        raise ValidationError("All fields are required.")

    name = require_text(name, "User name", MAX_NAME_LENGTH)
    email = require_email(email)
    birth_date = require_date(birth_date, "Birth date")
    control_id = require_id(control_id, "Control")

    user = _require_user(store, user_id)
    _ensure_available(store, name, email, exclude_id=user.id)

    user.name = name
    user.email = email
    user.birth_date = birth_date
    control = store.find_one(UserControl, user_id=user.id)
    if control is None:
        control = UserControl(user_id=user.id, control_id=control_id)
    else:
        control.control_id = control_id

    try:
        store.stage(user)
        store.stage(control)
        store.commit()
    except DuplicateRecordError:
        raise ValidationError("User name or email is already in use.") from None

    logger.info("Updated profile of user %s", user.id)
    return user, control_id


def delete_user(store: Store, user_id: Any) -> int:
    """Remove a user with their scores and control; returns removed score count."""

    user_id = _require_user(store, user_id).id
    deleted_scores = store.delete(ScoreRecord, user_id=user_id)
    store.delete(UserControl, user_id=user_id)
    store.delete(User, id=user_id)
    store.commit()

    logger.info("Deleted user %s and %d score records", user_id, deleted_scores)
    return deleted_scores


__all__ = [
    "MAX_NAME_LENGTH",
    "authenticate",
    "delete_user",
    "get_profile",
    "register_user",
    "reset_password",
    "update_profile",
    "user_to_dict",
]
