"""Similarity score between a target color and a captured color."""

from __future__ import annotations

import math
from typing import Sequence

from ..core.config import SCORE_EXPONENT, SCORE_MULTIPLIER
from .colors import round_half_up

MAX_DISTANCE = math.sqrt(3 * 255**2)


def color_distance(a: Sequence[int], b: Sequence[int]) -> float:
    """Euclidean distance between two RGB triples."""

    dr = a[0] - b[0]
    dg = a[1] - b[1]
    db = a[2] - b[2]
    return math.sqrt(dr * dr + dg * dg + db * db)


def score_colors(
    target: Sequence[int],
    captured: Sequence[int],
    exponent: float = SCORE_EXPONENT,
    multiplier: float = SCORE_MULTIPLIER,
) -> int:
    """Map the RGB distance to an integer score in [0, 100].

    The normalized distance goes through a sub-linear power curve and is
    scaled by ``multiplier``, so scores hit 0 well before opposite corners of
    the cube while near matches stay close to 100.
    """

    if exponent <= 0 or multiplier <= 0:
        raise ValueError("Score exponent and multiplier must be positive")

    normalized = color_distance(target, captured) / MAX_DISTANCE
    raw = 100 * (1 - normalized**exponent * multiplier)
    return round_half_up(max(0.0, raw))


__all__ = ["MAX_DISTANCE", "color_distance", "score_colors"]
