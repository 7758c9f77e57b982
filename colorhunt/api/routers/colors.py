"""Target colors and scoring endpoints."""

from __future__ import annotations

import io
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, File, Form, UploadFile
from fastapi.responses import JSONResponse
from PIL import Image, UnidentifiedImageError

from ...services.colors import (
    RGB,
    catalog_to_list,
    find_color,
    hex_to_rgb,
    parse_rgb,
    pick_random,
    rgb_to_hex,
)
from ...services.sampler import sample_image
from ...services.scoring import score_colors

router = APIRouter(prefix="/api", tags=["colors"])

MAX_FRAME_BYTES = 10 * 1024 * 1024


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _result(target: RGB, captured: RGB) -> Dict[str, Any]:
    return {
        "score": score_colors(target, captured),
        "target": rgb_to_hex(target),
        "captured": rgb_to_hex(captured),
        "rgb": captured._asdict(),
    }


@router.get("/colors")
def list_colors():
    """Every color a round can ask for."""

    return catalog_to_list()


@router.get("/colors/random")
def random_color():
    """Pick the target color for a new round."""

    return pick_random().to_dict()


@router.post("/score")
def score(body: Optional[Dict[str, Any]] = Body(default=None)):
    """Score a captured color against a catalog color or a raw target."""

    body = body or {}
    color_name = body.get("color_name")
    try:
        if color_name:
            target_color = find_color(color_name)
            if target_color is None:
                return _error(400, "Unknown color")
            target = target_color.rgb
        else:
            target = hex_to_rgb(body.get("target") or "")
        captured = parse_rgb(body.get("captured"))
    except ValueError as exc:
        return _error(400, str(exc))

    return _result(target, captured)


@router.post("/capture")
async def capture(image: UploadFile = File(...), color_name: str = Form(...)):
    """Sample the center of an uploaded camera frame and score it."""

    target_color = find_color(color_name)
    if target_color is None:
        return _error(400, "Unknown color")

    content = await image.read()
    if not content:
        return _error(400, "Image is empty")
    if len(content) > MAX_FRAME_BYTES:
        return _error(400, "Image too large. Maximum size is 10MB.")

    try:
        with Image.open(io.BytesIO(content)) as frame:
            captured = sample_image(frame)
    except (UnidentifiedImageError, OSError):
        return _error(400, "Unreadable image")

    return _result(target_color.rgb, captured)


__all__ = ["router"]
