"""Core configuration and infrastructure helpers.

Storage lives in :mod:`colorhunt.core.database`; it is imported directly so
that the models can depend on this package without a cycle.
"""

from .config import (
    ALLOWED_CORS_ORIGINS,
    COMMENTARY_TIMEOUT,
    DATABASE_URL,
    GEMINI_API_KEY,
    GEMINI_MODEL,
    LOG_LEVEL,
    PORT,
    RELOAD,
    SCORE_EXPONENT,
    SCORE_MULTIPLIER,
    SQLITE_PATH,
)
from .logging import setup_logger
from .time import isoformat_utc, utcnow

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
    "isoformat_utc",
    "setup_logger",
    "utcnow",
]
