"""FastAPI application factory and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .api import register_routes
from .core import ALLOWED_CORS_ORIGINS, DATABASE_URL, PORT, RELOAD, SQLITE_PATH, setup_logger
from .core.database import RankingStore, build_store
from .services.commentary import CommentaryGenerator

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store: RankingStore = app.state.store
    try:
        store.init_schema()
    except SQLAlchemyError:
        # Startup continues; each request reports store failures on its own.
        logger.exception("Failed to create the rankings table on %s backend", store.backend)
    yield
    store.close()


def create_app(
    store: Optional[RankingStore] = None,
    commentary: Optional[CommentaryGenerator] = None,
) -> FastAPI:
    app = FastAPI(title="Color Hunt API", version="0.1.0", lifespan=lifespan)
    app.state.store = store if store is not None else build_store(DATABASE_URL, SQLITE_PATH)
    app.state.commentary = commentary if commentary is not None else CommentaryGenerator()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Non-object or malformed bodies carry none of the expected fields.
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse({"error": "Missing fields"}, status_code=400)

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("colorhunt.app:app", host="0.0.0.0", port=PORT, reload=RELOAD)
