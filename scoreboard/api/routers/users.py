"""Account and profile endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...services.storage import Store
from ...services.users import (
    authenticate,
    delete_user,
    get_profile,
    register_user,
    reset_password,
    update_profile,
    user_to_dict,
)
from ...utils import pick_field
from ..dependencies import get_store

router = APIRouter(tags=["users"])


@router.post("/users/register")
@router.post("/registrar", include_in_schema=False)
def register(body: Dict[str, Any], store: Store = Depends(get_store)):
    """Register a user and the control they play with."""

    user = register_user(
        store,
        name=pick_field(body, "name", "nome"),
        email=pick_field(body, "email"),
        password=pick_field(body, "password", "senha"),
        birth_date=pick_field(body, "birthDate", "dataNascimento"),
        control_id=pick_field(body, "controlId", "controle"),
    )
    return JSONResponse(
        {"message": "User registered.", "user": user_to_dict(user)}, status_code=201
    )


@router.post("/users/login")
@router.post("/login", include_in_schema=False)
def login(body: Dict[str, Any], store: Store = Depends(get_store)):
    """Check email and password and return the matching profile."""

    user, control_id = authenticate(
        store,
        email=pick_field(body, "email"),
        password=pick_field(body, "password", "senha"),
    )
    return {"message": "Login successful.", "user": user_to_dict(user), "controlId": control_id}


@router.post("/users/reset-password")
@router.post("/redefinir-senha", include_in_schema=False)
def post_reset_password(body: Dict[str, Any], store: Store = Depends(get_store)):
    reset_password(
        store,
        email=pick_field(body, "email"),
        password=pick_field(body, "password", "senha"),
        birth_date=pick_field(body, "birthDate", "dataNascimento"),
    )
    return {"message": "Password reset."}


@router.get("/users/{user_id}")
@router.get("/usuario/{user_id}", include_in_schema=False)
def read_user(user_id: str, store: Store = Depends(get_store)):
    user, control_id = get_profile(store, user_id)
    return {**user_to_dict(user), "controlId": control_id}


@router.put("/users/{user_id}")
@router.put("/atualizar-dados/{user_id}", include_in_schema=False)
def put_user(user_id: str, body: Dict[str, Any], store: Store = Depends(get_store)):
    """Replace a user's personal data and control."""

    user, control_id = update_profile(
        store,
        user_id,
        name=pick_field(body, "name", "nome"),
        email=pick_field(body, "email"),
        birth_date=pick_field(body, "birthDate", "dataNascimento"),
        control_id=pick_field(body, "controlId", "controle"),
    )
    return {
        "message": "Profile updated.",
        "user": user_to_dict(user),
        "controlId": control_id,
    }


@router.delete("/users/{user_id}")
@router.delete("/deletar-usuario/{user_id}", include_in_schema=False)
def remove_user(user_id: str, store: Store = Depends(get_store)):
    """Delete a user along with their scores."""

    deleted_scores = delete_user(store, user_id)
    return {"message": "User and scores deleted.", "deletedScores": deleted_scores}


__all__ = ["router"]
