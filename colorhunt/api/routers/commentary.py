"""Round commentary endpoint."""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from ...services.colors import parse_rgb

router = APIRouter(prefix="/api", tags=["commentary"])


@router.post("/commentary")
async def commentary(request: Request, body: Optional[Dict[str, Any]] = Body(default=None)):
    """Ask the judge for a comment on a finished round."""

    body = body or {}
    target_name = body.get("target_name")
    target_hex = body.get("target_hex") or ""
    score = body.get("score")
    try:
        captured = parse_rgb(body.get("captured"))
    except ValueError as exc:
        return JSONResponse({"error": str(exc)}, status_code=400)
    if not target_name or isinstance(score, bool) or not isinstance(score, (int, float)):
        return JSONResponse({"error": "Missing fields"}, status_code=400)
    if not math.isfinite(score):
        return JSONResponse({"error": "Invalid score"}, status_code=400)

    generator = request.app.state.commentary
    text = await generator.generate(target_name, target_hex, captured, int(score))
    return {"commentary": text}


__all__ = ["router"]
