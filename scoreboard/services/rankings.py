"""Score submission and leaderboard ranking.

The leaderboard is "the best scores among the fastest players": records are
first narrowed to the ``limit`` fastest completion times for a game/control
pair, and only that pool is re-ranked by score. A record outside the
fastest pool never reaches the result, however high its score.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from ..core.config import UNKNOWN_PLAYER_NAME
from ..core.errors import StorageError
from ..core.time import utcnow
from ..models import ScoreRecord, User
from .storage import DuplicateRecordError, Store
from .validation import require_duration, require_id, require_int

logger = logging.getLogger(__name__)

TOP_N = 3


@dataclass(frozen=True)
class RankedEntry:
    """Score record enriched with the player's display name."""

    id: int
    user_id: int
    game_id: int
    control_id: int
    score: int
    elapsed_time: float
    player_name: str


def score_to_dict(record: ScoreRecord) -> Dict[str, Any]:
    return {
        "id": record.id,
        "userId": record.user_id,
        "gameId": record.game_id,
        "controlId": record.control_id,
        "score": record.score,
        "time": record.elapsed_time,
    }


def ranked_entry_to_dict(entry: RankedEntry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "gameId": entry.game_id,
        "controlId": entry.control_id,
        "score": entry.score,
        "time": entry.elapsed_time,
        "playerName": entry.player_name,
    }


def candidate_pool(records: Iterable[ScoreRecord], limit: int = TOP_N) -> List[ScoreRecord]:
    """The ``limit`` fastest records; equal times keep insertion (id) order."""

    ordered = sorted(records, key=lambda record: (record.elapsed_time, record.id or 0))
    return ordered[:limit]


def rank_by_score(pool: Sequence[ScoreRecord], limit: int = TOP_N) -> List[ScoreRecord]:
    """Re-rank a candidate pool by descending score.

    The sort is stable, so equal scores keep the faster-first pool order.
    """

    ordered = sorted(pool, key=lambda record: record.score, reverse=True)
    return ordered[:limit]


def attach_player_names(
    records: Iterable[ScoreRecord],
    names: Mapping[int, str],
    unknown: str = UNKNOWN_PLAYER_NAME,
) -> List[RankedEntry]:
    return [
        RankedEntry(
            id=record.id,
            user_id=record.user_id,
            game_id=record.game_id,
            control_id=record.control_id,
            score=record.score,
            elapsed_time=record.elapsed_time,
            player_name=names.get(record.user_id) or unknown,
        )
        for record in records
    ]


def resolve_player_names(store: Store, user_ids: Iterable[int]) -> Dict[int, str]:
    """Batch-resolve display names; a failed lookup yields an empty mapping."""

    try:
        users = store.find_in(User, "id", set(user_ids))
    except StorageError:
        logger.warning("Player name lookup failed; falling back to placeholder names")
        return {}
    return {user.id: user.name for user in users}


def get_top_rankings(
    store: Store, game_id: Any, control_id: Any, limit: Any = TOP_N
) -> List[RankedEntry]:
    """Best scores among the fastest times for one game played with one control."""

    game_id = require_id(game_id, "gameId")
    control_id = require_id(control_id, "controlId")
    limit = require_id(limit, "limit")

    records = store.find(ScoreRecord, game_id=game_id, control_id=control_id)
    ranked = rank_by_score(candidate_pool(records, limit), limit)
    store.detach(ranked)
    names = resolve_player_names(store, (record.user_id for record in ranked))
    return attach_player_names(ranked, names)


def submit_score(
    store: Store,
    user_id: Any,
    game_id: Any,
    control_id: Any,
    score: Any,
    elapsed_time: Any,
) -> Tuple[ScoreRecord, bool]:
    """Create or overwrite the record for a user/game/control triple.

    Returns the stored record and whether it was newly created. The latest
    submission always wins, even when it is worse than the stored one.
    """

    values = {
        "user_id": require_id(user_id, "userId"),
        "game_id": require_id(game_id, "gameId"),
        "control_id": require_id(control_id, "controlId"),
    }
    patch = {
        "score": require_int(score, "score"),
        "elapsed_time": require_duration(elapsed_time, "time"),
        "updated_at": utcnow(),
    }

    existing = store.find_one(ScoreRecord, **values)
    if existing is not None:
        record = store.update(existing, **patch)
        logger.info("Updated score record %s", record.id)
        return record, False

    try:
        record = store.insert(ScoreRecord(**values, **patch))
    except DuplicateRecordError:
        # A concurrent submission created the triple first; overwrite it.
        existing = store.find_one(ScoreRecord, **values)
        if existing is None:
            raise
        record = store.update(existing, **patch)
        logger.info("Updated score record %s after concurrent insert", record.id)
        return record, False

    logger.info("Created score record %s", record.id)
    return record, True


__all__ = [
    "TOP_N",
    "RankedEntry",
    "attach_player_names",
    "candidate_pool",
    "get_top_rankings",
    "rank_by_score",
    "ranked_entry_to_dict",
    "resolve_player_names",
    "score_to_dict",
    "submit_score",
]
