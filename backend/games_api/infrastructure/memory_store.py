"""In-memory Collection Store.

Same contract as JsonFileGameStore without any file: records live in a list
for the lifetime of the process. Used by tests and by STORE_BACKEND=memory.
"""

import copy

from games_api.core.domain_types import GameId, GameRecord


class InMemoryGameStore:
    """List-backed GameRepository.

    Records are deep-copied in and out, so mutating a returned record never
    changes stored state (the JSON store behaves the same way by construction).
    """

    def __init__(self, games: list[GameRecord] | None = None) -> None:
        self._games: list[GameRecord] = copy.deepcopy(games or [])

    async def list_all(self) -> list[GameRecord]:
        return copy.deepcopy(self._games)

    async def find_by_id(self, game_id: GameId) -> GameRecord | None:
        game = self._find(game_id)
        return copy.deepcopy(game) if game is not None else None

    async def insert(self, record: GameRecord) -> GameRecord:
        self._games.append(copy.deepcopy(record))
        return record

    async def insert_if_absent(self, record: GameRecord) -> bool:
        if self._find(record.get("id")) is not None:
            return False
        self._games.append(copy.deepcopy(record))
        return True

    async def update_by_id(
        self, game_id: GameId, patch: GameRecord,
    ) -> GameRecord | None:
        game = self._find(game_id)
        if game is None:
            return None
        game.update(copy.deepcopy(patch))
        return copy.deepcopy(game)

    async def delete_by_id(self, game_id: GameId) -> bool:
        game = self._find(game_id)
        if game is None:
            return False
        self._games.remove(game)
        return True

    async def health_check(self) -> bool:
        return True

    def _find(self, game_id: GameId) -> GameRecord | None:
        return next((g for g in self._games if g.get("id") == game_id), None)
