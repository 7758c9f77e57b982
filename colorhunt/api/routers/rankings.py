"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from ...core.database import RankingStore, get_store
from ...core.logging import setup_logger
from ...services.rankings import SubmissionError, ranking_to_dict, validate_submission

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/rankings", tags=["rankings"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@router.get("")
def list_rankings(color_name: Optional[str] = None, store: RankingStore = Depends(get_store)):
    """Top 10 entries, optionally for a single target color."""

    try:
        entries = store.list_top(color_name or None)
    except Exception:
        logger.exception("GET /api/rankings failed")
        return _error(500, "Internal server error")
    return [ranking_to_dict(entry) for entry in entries]


@router.post("")
def submit_ranking(
    body: Optional[Dict[str, Any]] = Body(default=None),
    store: RankingStore = Depends(get_store),
):
    """Store a finished round on the leaderboard."""

    try:
        submission = validate_submission(body)
    except SubmissionError as exc:
        return _error(400, str(exc))

    try:
        entry_id = store.insert(submission.username, submission.score, submission.color_name)
    except Exception:
        logger.exception("POST /api/rankings failed")
        return _error(500, "Internal server error")
    return {"id": entry_id}


__all__ = ["router"]
