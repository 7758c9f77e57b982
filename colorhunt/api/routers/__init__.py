"""Aggregate API routers."""

from fastapi import APIRouter

from .colors import router as colors_router
from .commentary import router as commentary_router
from .rankings import router as rankings_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    rankings_router,
    colors_router,
    commentary_router,
)

__all__ = ["ALL_ROUTERS"]
