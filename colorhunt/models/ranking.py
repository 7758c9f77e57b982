"""Database model for leaderboard submissions."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Ranking(SQLModel, table=True):
    """One submitted score for a target color."""

    __tablename__ = "rankings"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = ORMField(default=None, primary_key=True)
    username: str
    score: int
    color_name: str = ORMField(index=True)
    created_at: datetime = ORMField(
        default_factory=utcnow,
        sa_column_kwargs={"server_default": func.now()},
    )


__all__ = ["Ranking"]
