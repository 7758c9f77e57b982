"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Storage --------------------------------------------------------------------
# A networked database URL selects PostgreSQL; without one the rankings live
# in a local SQLite file.
DATABASE_URL = os.getenv("DATABASE_URL") or os.getenv("POSTGRES_URL") or None
SQLITE_PATH = Path(os.getenv("SQLITE_PATH", "rankings.db"))


# Gameplay tuning ------------------------------------------------------------
SCORE_EXPONENT = _env_float("SCORE_EXPONENT", 0.7)
SCORE_MULTIPLIER = _env_float("SCORE_MULTIPLIER", 1.5)


# Commentary -----------------------------------------------------------------
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or None
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
COMMENTARY_TIMEOUT = _env_float("COMMENTARY_TIMEOUT", 20.0)


# HTTP -----------------------------------------------------------------------
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique([*_frontend_origins, *_local_dev_origins])

PORT = int(os.getenv("PORT", "3000"))
RELOAD = _env_bool("RELOAD", False)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "COMMENTARY_TIMEOUT",
    "DATABASE_URL",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "LOG_LEVEL",
    "PORT",
    "RELOAD",
    "SCORE_EXPONENT",
    "SCORE_MULTIPLIER",
    "SQLITE_PATH",
]
