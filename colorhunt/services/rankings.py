"""Helpers for leaderboard submissions and their JSON form."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..core.time import isoformat_utc
from ..models import Ranking
from .colors import find_color

MAX_USERNAME_LENGTH = 10


class SubmissionError(ValueError):
    """A ranking submission the API refuses to store."""


@dataclass(frozen=True)
class Submission:
    username: str
    score: int
    color_name: str


def ranking_to_dict(entry: Ranking) -> Dict[str, Any]:
    """Serialise a ranking to its API shape."""

    return {
        "id": entry.id,
        "username": entry.username,
        "score": entry.score,
        "color_name": entry.color_name,
        "created_at": isoformat_utc(entry.created_at),
    }


def validate_submission(body: Optional[Mapping[str, Any]]) -> Submission:
    """Check a POSTed ranking before it reaches the store."""

    body = body or {}
    username = body.get("username")
    score = body.get("score")
    color_name = body.get("color_name")

    if isinstance(username, str):
        username = username.strip()
    if not username or score is None or not color_name:
        raise SubmissionError("Missing fields")

    if not isinstance(username, str) or len(username) > MAX_USERNAME_LENGTH:
        raise SubmissionError("Invalid username")

    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise SubmissionError("Invalid score")
    if isinstance(score, float) and not (math.isfinite(score) and score.is_integer()):
        raise SubmissionError("Invalid score")
    if not 0 <= score <= 100:
        raise SubmissionError("Invalid score")

    if not isinstance(color_name, str) or find_color(color_name) is None:
        raise SubmissionError("Unknown color")

    return Submission(username=username, score=int(score), color_name=color_name)


__all__ = [
    "MAX_USERNAME_LENGTH",
    "Submission",
    "SubmissionError",
    "ranking_to_dict",
    "validate_submission",
]
