"""Error Handlers: verifies every route shares one structured failure boundary.

Invariants:
    - Schema violations and malformed JSON → 400 VALIDATION_ERROR with field details
    - StoreError on any route → 500 STORE_ERROR envelope
    - Unexpected exceptions → 500 INTERNAL_ERROR, exception text not leaked
"""

import pytest

from games_api.core.errors import StoreError
from games_api.infrastructure.memory_store import InMemoryGameStore
from games_api.main import create_app


class BrokenStore(InMemoryGameStore):
    """Store whose every operation fails with the given exception factory."""

    def __init__(self, make_exc):
        super().__init__([{"id": "abc12345", "title": "Batman", "genre": "Adventure"}])
        self._make_exc = make_exc

    async def list_all(self):
        raise self._make_exc("list")

    async def find_by_id(self, game_id):
        raise self._make_exc("find")

    async def insert(self, record):
        raise self._make_exc("insert")

    async def insert_if_absent(self, record):
        raise self._make_exc("insert")

    async def update_by_id(self, game_id, patch):
        raise self._make_exc("update")

    async def delete_by_id(self, game_id):
        raise self._make_exc("delete")


ROUTES = [
    ("GET", "/games", None),
    ("GET", "/games/abc12345", None),
    ("POST", "/games", {"title": "Batman", "genre": "Adventure"}),
    ("PUT", "/games/abc12345", {"genre": "Action"}),
    ("DELETE", "/games/abc12345", None),
]


# ─── Validation ──────────────────────────────────────────────────

async def test_create_without_title_returns_400(client):
    res = await client.post("/games", json={"genre": "Adventure"})

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == "validation"
    assert "body.title" in [d["field"] for d in error["details"]]


async def test_create_with_blank_genre_returns_400(client):
    res = await client.post("/games", json={"title": "Batman", "genre": "   "})
    assert res.status_code == 400


async def test_create_with_non_string_title_returns_400(client):
    res = await client.post("/games", json={"title": 42, "genre": "Adventure"})
    assert res.status_code == 400


async def test_create_with_unsafe_id_returns_400(client):
    res = await client.post("/games", json={"id": "../etc", "title": "x", "genre": "y"})
    assert res.status_code == 400


async def test_malformed_json_returns_400(client):
    res = await client.post(
        "/games", content=b"{not json", headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_with_null_title_returns_400(client):
    created = (await client.post("/games", json={"title": "Batman", "genre": "Adventure"})).json()

    res = await client.put(f"/games/{created['id']}", json={"title": None})

    assert res.status_code == 400
    assert (await client.get(f"/games/{created['id']}")).json()["title"] == "Batman"


async def test_failed_validation_persists_nothing(client):
    await client.post("/games", json={"title": "No genre"})
    assert (await client.get("/games")).json() == []


# ─── Store failures ──────────────────────────────────────────────

@pytest.mark.parametrize("method,path,payload", ROUTES)
async def test_store_error_on_any_route_returns_500(settings, client_for, method, path, payload):
    store = BrokenStore(lambda op: StoreError("disk on fire", op))
    app = create_app(settings=settings, store=store)

    async with client_for(app) as client:
        res = await client.request(method, path, json=payload)

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "STORE_ERROR"
    assert error["category"] == "storage"
    assert error["severity"] == "critical"


@pytest.mark.parametrize("method,path,payload", ROUTES)
async def test_unexpected_error_returns_generic_500(settings, client_for, method, path, payload):
    store = BrokenStore(lambda op: RuntimeError(f"secret internals during {op}"))
    app = create_app(settings=settings, store=store)

    async with client_for(app, raise_app_exceptions=False) as client:
        res = await client.request(method, path, json=payload)

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in res.text
