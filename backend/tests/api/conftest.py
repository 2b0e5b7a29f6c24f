"""API test fixtures: apps built around injected stores + httpx async clients.

Invariants:
    - Every test gets a fresh store (in-memory, or a JSON file under tmp_path)
    - The store is injected through create_app(), never patched into module state
"""

import pytest
from httpx import ASGITransport, AsyncClient

from games_api.config import Settings
from games_api.core.domain_types import MissingIdPolicy, StoreBackend
from games_api.infrastructure.json_store import JsonFileGameStore
from games_api.infrastructure.memory_store import InMemoryGameStore
from games_api.main import create_app


def make_client(app, raise_app_exceptions: bool = True) -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions),
        base_url="http://test",
    )


@pytest.fixture
def client_for():
    """Factory for clients around ad-hoc apps (e.g. apps with failing stores)."""
    return make_client


@pytest.fixture
def settings():
    return Settings(store_backend=StoreBackend.MEMORY)


@pytest.fixture
def store():
    return InMemoryGameStore()


@pytest.fixture
async def client(settings, store):
    async with make_client(create_app(settings=settings, store=store)) as c:
        yield c


@pytest.fixture
async def strict_client(store):
    settings = Settings(
        store_backend=StoreBackend.MEMORY,
        missing_id_policy=MissingIdPolicy.STRICT,
    )
    async with make_client(create_app(settings=settings, store=store)) as c:
        yield c


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
async def json_client(settings, db_path):
    store = JsonFileGameStore(db_path)
    async with make_client(create_app(settings=settings, store=store)) as c:
        yield c
