"""Game id generation: short random alphanumeric tokens."""

import secrets
import string

DEFAULT_ID_LENGTH = 8
ID_ALPHABET = string.ascii_letters + string.digits


def generate_game_id(length: int = DEFAULT_ID_LENGTH) -> str:
    """Return a fresh random token of `length` characters from [A-Za-z0-9]."""
    if length < 1:
        raise ValueError(f"id length must be positive, got {length}")
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))
