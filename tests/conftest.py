from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Keep the storefront package importable when running the suite from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from storefront.core import config as core_config  # noqa: E402
from storefront.repositories.json_storage import Storage  # noqa: E402


@pytest.fixture()
def settings(tmp_path, monkeypatch):
    """Settings pointing at a temporary data/static directory with default admin credentials."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("STATIC_DIR", str(tmp_path / "web"))
    for var in ("ADMIN_USERNAME", "ADMIN_PASSWORD", "APP_ENV", "HASH_PASSWORDS"):
        monkeypatch.delenv(var, raising=False)
    core_config.get_settings.cache_clear()
    yield core_config.get_settings()
    core_config.get_settings.cache_clear()


@pytest.fixture()
def storage(settings):
    return Storage.at(settings.data_dir)
