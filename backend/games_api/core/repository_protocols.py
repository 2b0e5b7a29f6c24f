"""Boundary Protocols: the Collection Store contract between services and storage.

Invariants:
    - Services NEVER import a concrete store; they receive a GameRepository
    - Records are plain dicts, returned as copies detached from stored state
    - Missing ids are never errors at this layer (None / False instead)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: implementations do file IO off the event loop
"""

from typing import Protocol

from games_api.core.domain_types import GameId, GameRecord


class GameRepository(Protocol):
    """Contract for game collection persistence, implemented by infrastructure/."""

    async def list_all(self) -> list[GameRecord]:
        """All records, in insertion order."""
        ...

    async def find_by_id(self, game_id: GameId) -> GameRecord | None:
        """First record whose `id` equals game_id, or None."""
        ...

    async def insert(self, record: GameRecord) -> GameRecord:
        """Append record, persist, and return it unchanged."""
        ...

    async def insert_if_absent(self, record: GameRecord) -> bool:
        """Append record unless a record with its id exists, in one atomic step.

        Returns True if the record was inserted.
        """
        ...

    async def update_by_id(
        self, game_id: GameId, patch: GameRecord,
    ) -> GameRecord | None:
        """Shallow-merge patch onto the matching record and persist.

        Returns the merged record, or None (without writing) when no record matches.
        """
        ...

    async def delete_by_id(self, game_id: GameId) -> bool:
        """Remove the first matching record and persist. Returns True if one was removed."""
        ...

    async def health_check(self) -> bool:
        """Whether the backing storage can currently be read."""
        ...
