"""Video Games API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GamesApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The game store is injected into create_app() and held on app.state

Design Decisions:
    - create_app() factory: tests build apps around an InMemoryGameStore or a
      tmp_path JSON file without touching module state
    - Lifespan over @app.on_event for logging setup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from games_api.api.error_handlers import register_error_handlers
from games_api.api.routes import games, health
from games_api.config import Settings, get_settings
from games_api.core.repository_protocols import GameRepository
from games_api.infrastructure.observability import setup_logging
from games_api.infrastructure.store_factory import build_game_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.api_title} started")
    yield
    logger.info(f"{settings.api_title} shutting down")


def create_app(
    settings: Settings | None = None, store: GameRepository | None = None,
) -> FastAPI:
    """Build the application around an explicit store (default: from settings)."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.api_title, version=settings.api_version,
        description="CRUD API for video game records backed by a JSON document",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else build_game_store(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(games.router)

    register_error_handlers(app)
    return app


app = create_app()
