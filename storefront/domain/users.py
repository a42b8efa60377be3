"""Domain helpers for visitor usernames."""
from __future__ import annotations

from typing import Any, Iterable, Mapping


def normalize_username(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def is_reserved_username(value: str, admin_username: str) -> bool:
    """The admin identity can never be registered, whatever the case."""
    return bool(value) and value.lower() == (admin_username or "").lower()


def username_in_use(users: Iterable[Mapping[str, Any]], value: str) -> bool:
    """Case-insensitive check against every stored username."""
    if not value:
        return False
    wanted = value.lower()
    for user in users:
        existing = user.get("username") if isinstance(user, Mapping) else None
        if isinstance(existing, str) and existing.lower() == wanted:
            return True
    return False
