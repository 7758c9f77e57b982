"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...core.config import SCORE_EXPONENT, SCORE_MULTIPLIER
from ...core.database import TOP_N, RankingStore, get_store
from ...services.sampler import SAMPLE_WINDOW

router = APIRouter(tags=["system"])


@router.get("/health")
def health(store: RankingStore = Depends(get_store)) -> Dict[str, Any]:
    """Readiness probe; also reports whether rankings survive a restart."""

    return {"ok": True, "storage": store.status()}


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose gameplay constants to the frontend."""

    return {
        "top_n": TOP_N,
        "sample_window": SAMPLE_WINDOW,
        "score_exponent": SCORE_EXPONENT,
        "score_multiplier": SCORE_MULTIPLIER,
    }


__all__ = ["router"]
