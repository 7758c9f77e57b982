"""Logger setup shared by the application modules."""

from __future__ import annotations

import logging
import sys

from .config import LOG_LEVEL


def setup_logger(name: str) -> logging.Logger:
    """Return a logger with the application's console formatting."""

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = getattr(logging, LOG_LEVEL, logging.INFO)
    logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


__all__ = ["setup_logger"]
