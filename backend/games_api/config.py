"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), single instance per process
    - Defaults work out-of-the-box: ./db.json, JSON store, 8-char ids

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from games_api.core.domain_types import MissingIdPolicy, StoreBackend


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # API
    api_title: str = "Video Games API"
    api_version: str = "1.0.0"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Store
    store_backend: StoreBackend = StoreBackend.JSON
    data_file: Path = Path("db.json")
    games_collection: str = Field("games", min_length=1)

    # Games
    game_id_length: int = Field(8, ge=4, le=64)
    missing_id_policy: MissingIdPolicy = MissingIdPolicy.IDEMPOTENT

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
