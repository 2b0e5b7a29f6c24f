"""Game Schemas: Pydantic models with field-level validation for the /games boundary.

Invariants:
    - GameCreate: title and genre required, 1-200 chars, not blank; stored as sent
    - GameCreate.id optional; when present it must be a safe token
    - GameUpdate: every field optional, explicit null title/genre rejected
    - GameResponse tolerates legacy records (no id, non-string id, no title/genre)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

GAME_ID_PATTERN = r"^[A-Za-z0-9_-]{1,64}$"
_REQUIRED_TEXT_FIELDS = ("title", "genre")


def _reject_blank(v: str | None) -> str | None:
    if v is not None and not v.strip():
        raise ValueError("must not be blank")
    return v


class GameCreate(BaseModel):
    """Game creation payload. The server assigns `id` unless the client sends one."""
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"title": "Batman", "genre": "Adventure"}},
    )

    id: str | None = Field(None, pattern=GAME_ID_PATTERN)
    title: str = Field(min_length=1, max_length=200)
    genre: str = Field(min_length=1, max_length=200)

    _not_blank = field_validator("title", "genre")(_reject_blank)

    def to_record(self) -> dict[str, Any]:
        """Payload fields as a plain dict; `id` only when the client supplied one."""
        data = self.model_dump()
        if data.get("id") is None:
            data.pop("id", None)
        return data


class GameUpdate(BaseModel):
    """Partial update payload, shallow-merged onto the stored record."""
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"genre": "Action"}},
    )

    # Accepted only when it repeats the path id; ids are immutable.
    id: str | None = None
    title: str | None = Field(None, min_length=1, max_length=200)
    genre: str | None = Field(None, min_length=1, max_length=200)

    _not_blank = field_validator("title", "genre")(_reject_blank)

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in _REQUIRED_TEXT_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_patch(self) -> dict[str, Any]:
        """Only the fields the client actually sent, extras included."""
        declared = type(self).model_fields
        patch = {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name in declared
        }
        patch.update(self.model_extra or {})
        return patch


class GameResponse(BaseModel):
    """A stored game as returned by the API."""
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {"id": "dOBY0kFa", "title": "Batman", "genre": "Adventure"},
        },
    )

    id: str | int | None = None
    title: str | None = None
    genre: str | None = None
