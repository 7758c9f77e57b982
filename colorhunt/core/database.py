"""Ranking storage backends.

Two interchangeable stores share one interface: an embedded SQLite file and a
networked PostgreSQL database. The choice is made once, by :func:`build_store`,
from whether a database URL is configured.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool, StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

from ..models import Ranking
from .logging import setup_logger

logger = setup_logger(__name__)

TOP_N = 10


class MissingFieldsError(ValueError):
    """Raised when a ranking is inserted without a required field."""


class RankingStore:
    """Storage interface for leaderboard entries.

    Subclasses provide the engine and its connection lifecycle; queries are
    shared.
    """

    backend = "abstract"

    def __init__(self) -> None:
        self._engine: Optional[Engine] = None
        self.persistent = True

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        raise NotImplementedError

    @contextmanager
    def _session(self) -> Iterator[Session]:
        with Session(self.engine) as session:
            yield session

    def init_schema(self) -> None:
        """Create the ``rankings`` table if it does not exist yet."""

        SQLModel.metadata.create_all(self.engine, tables=[Ranking.__table__])
        logger.info("Table 'rankings' ensured on %s backend", self.backend)

    def list_top(self, color_name: Optional[str] = None, limit: int = TOP_N) -> List[Ranking]:
        """Return the best entries, highest score first.

        Equal scores keep submission order (earlier ``created_at``, then lower
        ``id``). ``color_name`` filters on an exact, case-sensitive match.
        """

        statement = select(Ranking)
        if color_name:
            statement = statement.where(Ranking.color_name == color_name)
        statement = statement.order_by(
            Ranking.score.desc(), Ranking.created_at.asc(), Ranking.id.asc()
        ).limit(limit)
        with self._session() as session:
            return list(session.exec(statement).all())

    def insert(self, username: Optional[str], score: Optional[int], color_name: Optional[str]) -> int:
        """Persist a submission and return its new id.

        Only presence is checked here. Callers own the remaining validation:
        that ``color_name`` is a catalog color, that ``score`` lies in
        [0, 100] and that ``username`` fits the display limit.
        """

        if not username or score is None or not color_name:
            raise MissingFieldsError("Missing fields")

        entry = Ranking(username=username, score=int(score), color_name=color_name)
        with self._session() as session:
            session.add(entry)
            session.commit()
            session.refresh(entry)
            return int(entry.id)

    def status(self) -> Dict[str, Any]:
        return {"backend": self.backend, "persistent": self.persistent}

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


class EmbeddedRankingStore(RankingStore):
    """SQLite store holding one connection for the whole process.

    The file is opened on first use. When it cannot be opened the store keeps
    working from an in-memory database and reports ``persistent = False``.
    """

    backend = "sqlite"

    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self.path = Path(path)
        self._lock = threading.RLock()

    @property
    def engine(self) -> Engine:
        with self._lock:
            return super().engine

    def _create_engine(self) -> Engine:
        engine = _sqlite_engine(f"sqlite:///{self.path}")
        try:
            with engine.connect():
                pass
        except SQLAlchemyError:
            logger.exception(
                "Failed to open SQLite database at %s, using in-memory storage", self.path
            )
            engine.dispose()
            self.persistent = False
            return _sqlite_engine("sqlite://")

        self.persistent = True
        logger.info("Local SQLite initialized at %s", self.path)
        return engine

    @contextmanager
    def _session(self) -> Iterator[Session]:
        with self._lock:
            with Session(self.engine) as session:
                yield session

    def status(self) -> Dict[str, Any]:
        status = super().status()
        status["path"] = str(self.path) if self.persistent else ":memory:"
        return status

    def close(self) -> None:
        with self._lock:
            super().close()


class NetworkRankingStore(RankingStore):
    """PostgreSQL store that opens a fresh connection for every query."""

    backend = "postgres"

    def __init__(self, url: str) -> None:
        super().__init__()
        self.url = normalize_postgres_url(url)

    def _create_engine(self) -> Engine:
        logger.info("Using networked PostgreSQL backend")
        return create_engine(self.url, poolclass=NullPool)


def _sqlite_engine(url: str) -> Engine:
    return create_engine(
        url, connect_args={"check_same_thread": False}, poolclass=StaticPool
    )


def normalize_postgres_url(url: str) -> str:
    """Point a ``postgres://`` style URL at the psycopg driver."""

    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    return url


def build_store(database_url: Optional[str], sqlite_path: Path | str) -> RankingStore:
    """Pick the backend for this process."""

    if database_url:
        return NetworkRankingStore(database_url)
    logger.info("No database URL configured, using local SQLite")
    return EmbeddedRankingStore(sqlite_path)


def get_store(request: Request) -> RankingStore:
    """FastAPI dependency returning the application's ranking store."""

    return request.app.state.store


__all__ = [
    "EmbeddedRankingStore",
    "MissingFieldsError",
    "NetworkRankingStore",
    "RankingStore",
    "TOP_N",
    "build_store",
    "get_store",
    "normalize_postgres_url",
]
