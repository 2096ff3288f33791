"""Score submission and leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ...services.rankings import (
    get_top_rankings,
    ranked_entry_to_dict,
    score_to_dict,
    submit_score,
)
from ...services.storage import Store
from ...utils import pick_field
from ..dependencies import get_store

router = APIRouter(tags=["scores"])


@router.post("/scores")
@router.post("/registrar-pontuacao", include_in_schema=False)
def post_score(body: Dict[str, Any], store: Store = Depends(get_store)):
    """Record a result, overwriting the previous one for the same game and control."""

    record, created = submit_score(
        store,
        user_id=pick_field(body, "userId", "id_usuario"),
        game_id=pick_field(body, "gameId", "id_jogo"),
        control_id=pick_field(body, "controlId", "id_controle"),
        score=pick_field(body, "score", "pontuacao"),
        elapsed_time=pick_field(body, "time", "tempo"),
    )
    message = "Score recorded." if created else "Score updated."
    return JSONResponse(
        {"message": message, "score": score_to_dict(record)},
        status_code=201 if created else 200,
    )


@router.get("/scores/top")
@router.get("/maiores-pontuacoes", include_in_schema=False)
def get_rankings(
    game_id: Optional[str] = Query(None, alias="gameId"),
    control_id: Optional[str] = Query(None, alias="controlId"),
    legacy_game_id: Optional[str] = Query(None, alias="id_jogo"),
    legacy_control_id: Optional[str] = Query(None, alias="id_controle"),
    store: Store = Depends(get_store),
):
    """Best scores among the fastest times for a game and control."""

    entries = get_top_rankings(
        store,
        game_id=game_id if game_id is not None else legacy_game_id,
        control_id=control_id if control_id is not None else legacy_control_id,
    )
    return {
        "message": "Rankings retrieved.",
        "rankings": [ranked_entry_to_dict(entry) for entry in entries],
    }


__all__ = ["router"]
