"""FastAPI dependencies: the injected store and the catalog built on it."""

from fastapi import Depends, Request

from games_api.config import Settings
from games_api.core.repository_protocols import GameRepository
from games_api.services.game_catalog import GameCatalog


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> GameRepository:
    # Set once by create_app(); never swapped per request
    return request.app.state.store


def get_catalog(
    store: GameRepository = Depends(get_store),
    settings: Settings = Depends(get_settings_dep),
) -> GameCatalog:
    return GameCatalog(
        store,
        id_length=settings.game_id_length,
        missing_id_policy=settings.missing_id_policy,
    )
