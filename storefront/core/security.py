"""Password helpers for visitor accounts.

Passwords are kept as given unless hashing is switched on; hashed values carry
a prefix so both representations can live in the same users file.
"""

from __future__ import annotations

import secrets

from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_PREFIX = "argon2$"


def hash_password(password: str) -> str:
    """Create an Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


def is_hashed(stored: str | None) -> bool:
    return (stored or "").startswith(_PREFIX)


def store_password(password: str, *, hashing: bool) -> str:
    return hash_password(password) if hashing else password


def verify_password(password: str, stored: str | None) -> bool:
    if not isinstance(password, str) or not isinstance(stored, str):
        return False
    if is_hashed(stored):
        hashed = stored[len(_PREFIX) :]
        try:
            return _ph.verify(hashed, password)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
    return secrets.compare_digest(password.encode("utf-8"), stored.encode("utf-8"))
