"""
Configuration helpers for the storefront backend.

Routers and services read settings through get_settings() instead of touching
os.environ directly, so tests can swap the environment and clear the cache.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_ADMIN_USERNAME = "alaa"
DEFAULT_ADMIN_PASSWORD = "0000"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    admin_username: str
    admin_password: str
    data_dir: Path
    static_dir: Path
    host: str
    port: int
    log_level: str
    hash_passwords: bool

    @property
    def secure_cookies(self) -> bool:
        return self.app_env == "prod"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _path(value: str | None, default: Path) -> Path:
        raw = (value or "").strip()
        return Path(raw).expanduser() if raw else default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        admin_username=os.getenv("ADMIN_USERNAME") or DEFAULT_ADMIN_USERNAME,
        admin_password=os.getenv("ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD,
        data_dir=_path(os.getenv("DATA_DIR"), PROJECT_ROOT / "data"),
        static_dir=_path(os.getenv("STATIC_DIR"), PROJECT_ROOT / "web"),
        host=os.getenv("HOST") or "127.0.0.1",
        port=_int(os.getenv("PORT", "3000"), 3000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        hash_passwords=_bool(os.getenv("HASH_PASSWORDS"), False),
    )
