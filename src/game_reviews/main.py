"""
FastAPI application factory for the board-game reviews API.

    uvicorn game_reviews.main:create_app --factory
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from game_reviews.api.v1 import router as api_router
from game_reviews.api.v1.error_handlers import register_exception_handlers
from game_reviews.config import Settings, get_settings
from game_reviews.core.logging import RequestIDMiddleware, setup_logging
from game_reviews.database.session import dispose_engine
from game_reviews.utils.project_info import get_project_version

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """The pooled engine is created lazily on first request and disposed here."""
    logger.info("app.startup", extra={"env": app.state.settings.ENV})
    yield
    await dispose_engine()
    logger.info("app.shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Board Game Reviews API",
        version=get_project_version(),
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestIDMiddleware)
    app.include_router(api_router, prefix=API_PREFIX)
    register_exception_handlers(app)

    return app
