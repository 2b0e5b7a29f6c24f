"""Game Catalog: id assignment and not-found policy on top of a GameRepository.

Invariants:
    - Generated ids come first in a new record; payload fields follow
    - A client-supplied id is honored only if no record already has it; the
      check and the append are one atomic store step (insert_if_absent)
    - Generated ids are re-drawn on collision (bounded attempts)
    - Ids never change after creation
    - Reads of a missing id raise GameNotFoundError; mutations follow MissingIdPolicy
    - update/delete never create records
"""

import logging
from typing import Any

from games_api.core.domain_types import GameId, GameRecord, MissingIdPolicy
from games_api.core.errors import (
    DuplicateGameIdError, ErrorContext, GameNotFoundError, GameValidationError,
    StoreError,
)
from games_api.core.id_generator import DEFAULT_ID_LENGTH, generate_game_id
from games_api.core.repository_protocols import GameRepository

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 5


class GameCatalog:
    """CRUD operations over the games collection."""

    def __init__(
        self,
        store: GameRepository,
        id_length: int = DEFAULT_ID_LENGTH,
        missing_id_policy: MissingIdPolicy = MissingIdPolicy.IDEMPOTENT,
    ):
        self.store = store
        self.id_length = id_length
        self.missing_id_policy = missing_id_policy

    async def list_games(self) -> list[GameRecord]:
        return await self.store.list_all()

    async def get_game(self, game_id: GameId) -> GameRecord:
        game = await self.store.find_by_id(game_id)
        if game is None:
            raise GameNotFoundError(game_id, "get")
        return game

    async def create_game(self, payload: dict[str, Any]) -> GameRecord:
        """Insert a new game.

        The record is `{"id": <generated>, **payload}`, so a payload `id`
        replaces the generated one. Such ids must be unused.
        """
        client_id = payload.get("id")
        fields = {k: v for k, v in payload.items() if k != "id"}
        if client_id is not None:
            game = {"id": client_id, **fields}
            if not await self.store.insert_if_absent(game):
                raise DuplicateGameIdError(client_id)
        else:
            game = await self._insert_with_new_id(fields)
        logger.info("Game created", extra={"game_id": game["id"], "operation": "create"})
        return game

    async def update_game(
        self, game_id: GameId, patch: dict[str, Any],
    ) -> GameRecord | None:
        """Shallow-merge patch onto the game and return the merged record.

        A missing id returns None (idempotent) or raises (strict).
        """
        patch = dict(patch)
        patch_id = patch.pop("id", None)
        if patch_id is not None and patch_id != game_id:
            raise GameValidationError(
                "Game id is immutable", "id",
                ErrorContext(game_id=game_id, operation="update"),
            )
        updated = await self.store.update_by_id(game_id, patch)
        if updated is None:
            self._on_missing(game_id, "update")
            return None
        logger.info("Game updated", extra={"game_id": game_id, "operation": "update"})
        return updated

    async def delete_game(self, game_id: GameId) -> None:
        removed = await self.store.delete_by_id(game_id)
        if not removed:
            self._on_missing(game_id, "delete")
            return
        logger.info("Game deleted", extra={"game_id": game_id, "operation": "delete"})

    async def _insert_with_new_id(self, fields: dict[str, Any]) -> GameRecord:
        for _ in range(MAX_ID_ATTEMPTS):
            game = {"id": GameId(generate_game_id(self.id_length)), **fields}
            if await self.store.insert_if_absent(game):
                return game
            logger.warning("Generated game id collided, retrying",
                           extra={"game_id": game["id"]})
        raise StoreError(
            f"no unused id after {MAX_ID_ATTEMPTS} attempts", "create",
        )

    def _on_missing(self, game_id: GameId, operation: str) -> None:
        if self.missing_id_policy == MissingIdPolicy.STRICT:
            raise GameNotFoundError(game_id, operation)
        logger.info(f"{operation} on missing game is a no-op",
                    extra={"game_id": game_id, "operation": operation})
