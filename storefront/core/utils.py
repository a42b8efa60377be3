"""
Utility helpers shared across routers/services.

Identifiers and admin session tokens come from a process-wide pseudo-random
generator seeded once at import time. They are unique enough for this
service but they are NOT cryptographically secure.
"""

from __future__ import annotations

import random
import time
from datetime import datetime, timezone

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_rng = random.Random()


def base36(value: int) -> str:
    if value < 0:
        return "-" + base36(-value)
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, 36)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def _now_ms() -> int:
    return int(time.time() * 1000)


def new_record_id(prefix: str) -> str:
    """Build ids like "p-lx3k9a2b-1z4c": millisecond clock plus a short random suffix."""
    return f"{prefix}-{base36(_now_ms())}-{base36(_rng.randrange(100000))}"


def new_session_token() -> str:
    """Clock component plus two independent random components."""
    return f"{base36(_now_ms())}-{base36(_rng.getrandbits(52))}-{base36(_rng.getrandbits(52))}"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
