"""Store Factory: selects the Collection Store implementation from settings."""

import logging

from games_api.config import Settings
from games_api.core.domain_types import StoreBackend
from games_api.core.repository_protocols import GameRepository
from games_api.infrastructure.json_store import JsonFileGameStore
from games_api.infrastructure.memory_store import InMemoryGameStore

logger = logging.getLogger(__name__)


def build_game_store(settings: Settings) -> GameRepository:
    """Build the store named by settings.store_backend."""
    if settings.store_backend == StoreBackend.MEMORY:
        logger.info("Using in-memory game store")
        return InMemoryGameStore()
    if settings.store_backend == StoreBackend.JSON:
        logger.info(f"Using JSON game store at {settings.data_file}")
        return JsonFileGameStore(settings.data_file, settings.games_collection)
    raise ValueError(f"Unsupported store backend: {settings.store_backend}")
