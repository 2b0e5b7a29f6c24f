"""Service test fixtures: catalogs over a fresh in-memory store."""

import pytest

from games_api.core.domain_types import MissingIdPolicy
from games_api.infrastructure.memory_store import InMemoryGameStore
from games_api.services.game_catalog import GameCatalog


@pytest.fixture
def store():
    return InMemoryGameStore()


@pytest.fixture
def catalog(store):
    return GameCatalog(store)


@pytest.fixture
def strict_catalog(store):
    return GameCatalog(store, missing_id_policy=MissingIdPolicy.STRICT)
