"""JSON File Store: the game collection persisted as one flat JSON document.

Invariants:
    - The document is a JSON object; the games collection is an array under one key
    - Other top-level keys in the document are preserved on every write
    - A missing file reads as an empty collection and is created on first write
    - Writes replace the file atomically (temp file + os.replace)
    - Mutations (read-modify-write) are serialized by one asyncio.Lock per store
    - OSError, malformed JSON and invalid UTF-8 are mapped to StoreError
    - An empty or blank file reads as an empty collection
    - Rewrites keep the permission bits of the existing file

Design Decisions:
    - Whole-document read per call, whole-document rewrite per mutation: O(n),
      no caching, the file is the only source of truth
    - Blocking file IO runs in a worker thread (asyncio.to_thread)
"""

import asyncio
import copy
import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from games_api.core.domain_types import GameId, GameRecord
from games_api.core.errors import ErrorContext, StoreError

logger = logging.getLogger(__name__)


class JsonFileGameStore:
    """GameRepository backed by a JSON document on disk."""

    def __init__(self, path: Path | str, collection: str = "games"):
        self.path = Path(path)
        self.collection = collection
        self._lock = asyncio.Lock()

    # ─── GameRepository ─────────────────────────────────────────

    async def list_all(self) -> list[GameRecord]:
        document = await self._load("list")
        # Non-object entries are not games; the document format is unconstrained
        return [g for g in document[self.collection] if isinstance(g, dict)]

    async def find_by_id(self, game_id: GameId) -> GameRecord | None:
        document = await self._load("find")
        return _find(document[self.collection], game_id)

    async def insert(self, record: GameRecord) -> GameRecord:
        async with self._lock:
            document = await self._load("insert")
            document[self.collection].append(copy.deepcopy(record))
            await self._save(document, "insert")
        logger.debug("Game inserted", extra={"game_id": record.get("id")})
        return record

    async def insert_if_absent(self, record: GameRecord) -> bool:
        async with self._lock:
            document = await self._load("insert")
            games = document[self.collection]
            if _find(games, record.get("id")) is not None:
                return False
            games.append(copy.deepcopy(record))
            await self._save(document, "insert")
        logger.debug("Game inserted", extra={"game_id": record.get("id")})
        return True

    async def update_by_id(
        self, game_id: GameId, patch: GameRecord,
    ) -> GameRecord | None:
        async with self._lock:
            document = await self._load("update")
            game = _find(document[self.collection], game_id)
            if game is None:
                return None
            game.update(copy.deepcopy(patch))
            await self._save(document, "update")
        logger.debug("Game updated", extra={"game_id": game_id})
        return game

    async def delete_by_id(self, game_id: GameId) -> bool:
        async with self._lock:
            document = await self._load("delete")
            games = document[self.collection]
            index = _index_of(games, game_id)
            if index is None:
                return False
            del games[index]
            await self._save(document, "delete")
        logger.debug("Game deleted", extra={"game_id": game_id})
        return True

    async def health_check(self) -> bool:
        try:
            await self._load("health_check")
            return True
        except StoreError as e:
            logger.error(f"Store health check failed: {e.message}")
            return False

    # ─── File IO ────────────────────────────────────────────────

    async def _load(self, operation: str) -> dict[str, Any]:
        return await asyncio.to_thread(self._read_document, operation)

    async def _save(self, document: dict[str, Any], operation: str) -> None:
        await asyncio.to_thread(self._write_document, document, operation)

    def _read_document(self, operation: str) -> dict[str, Any]:
        if not self.path.exists():
            return {self.collection: []}
        try:
            text = self.path.read_text(encoding="utf-8")
            # Empty or blank file reads as the default document, like a missing one
            if not text.strip():
                return {self.collection: []}
            document = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Corrupt JSON in {self.path}: {e}")
            raise StoreError("document is not valid JSON", operation, self._context())
        except OSError as e:
            logger.error(f"Cannot read {self.path}: {e}")
            raise StoreError("document could not be read", operation, self._context())
        if not isinstance(document, dict):
            raise StoreError("document root must be a JSON object", operation, self._context())
        games = document.setdefault(self.collection, [])
        if not isinstance(games, list):
            raise StoreError(
                f"collection '{self.collection}' must be a JSON array",
                operation, self._context(),
            )
        return document

    def _write_document(self, document: dict[str, Any], operation: str) -> None:
        payload = json.dumps(document, indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            if self.path.exists():
                # mkstemp creates 0600; keep the permissions of the file being replaced
                os.chmod(tmp_name, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Cannot write {self.path}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreError("document could not be written", operation, self._context())

    def _context(self) -> ErrorContext:
        return ErrorContext(debug_info={"path": str(self.path)})


def _matches(game: Any, game_id: GameId) -> bool:
    return isinstance(game, dict) and game.get("id") == game_id


def _find(games: list[GameRecord], game_id: GameId) -> GameRecord | None:
    return next((g for g in games if _matches(g, game_id)), None)


def _index_of(games: list[GameRecord], game_id: GameId) -> int | None:
    return next((i for i, g in enumerate(games) if _matches(g, game_id)), None)
