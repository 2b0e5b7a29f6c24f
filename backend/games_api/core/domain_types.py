"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - GameId wraps str; ids are opaque and never parsed
    - All valid policy values encoded as Enums, no raw string matching
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

GameId = NewType("GameId", str)

# A stored game record. Schemaless on disk: extra fields survive round trips.
GameRecord = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class MissingIdPolicy(str, Enum):
    """How mutations (update/delete) treat an id with no matching record."""
    IDEMPOTENT = "idempotent"  # no-op success, never upserts
    STRICT = "strict"          # GameNotFoundError (404)


class StoreBackend(str, Enum):
    """Collection Store implementations selectable from settings."""
    JSON = "json"
    MEMORY = "memory"
