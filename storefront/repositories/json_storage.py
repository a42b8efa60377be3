"""
JSON file persistence for the product and user collections.

Each container is one JSON array in one file, rewritten in full on every save.
Services must wrap load-modify-save sequences in ``container.locked()`` so two
mutations of the same container never interleave.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

logger = logging.getLogger(__name__)

PRODUCTS_FILE = "products.json"
USERS_FILE = "users.json"

SEED_PRODUCTS: list[dict[str, Any]] = [
    {
        "id": "p1",
        "name": "Smart Desk Lamp",
        "price": 39,
        "category": "Office",
        "description": "Adjustable LED desk lamp with warm & cool light modes and USB charging.",
        "image": "https://images.pexels.com/photos/667838/pexels-photo-667838.jpeg?auto=compress&cs=tinysrgb&w=800",
    },
    {
        "id": "p2",
        "name": "Wireless Keyboard & Mouse",
        "price": 59,
        "category": "Accessories",
        "description": "Slim wireless combo with silent keys and long‑life battery – perfect for any desk.",
        "image": "https://images.pexels.com/photos/461064/pexels-photo-461064.jpeg?auto=compress&cs=tinysrgb&w=800",
    },
    {
        "id": "p3",
        "name": "USB‑C Multiport Hub",
        "price": 29,
        "category": "Electronics",
        "description": "Expand your laptop ports with HDMI, USB‑A, card reader and fast charging support.",
        "image": "https://images.pexels.com/photos/1054397/pexels-photo-1054397.jpeg?auto=compress&cs=tinysrgb&w=800",
    },
]


class JsonContainer:
    """One named collection persisted as a JSON array."""

    def __init__(self, path: Path, seed: list[Any]) -> None:
        self.path = Path(path)
        self._seed = seed
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self.path.stem

    def seed(self) -> list[Any]:
        return copy.deepcopy(self._seed)

    def load(self) -> list[Any]:
        """Return the stored collection, or the seed value when nothing usable is on disk."""
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info("No %s data at %s yet; using seed data (first run)", self.name, self.path)
            return self.seed()
        except (OSError, ValueError, RecursionError) as exc:
            logger.warning("Corrupt %s data at %s (%s); falling back to seed data", self.name, self.path, exc)
            return self.seed()
        if not isinstance(data, list):
            logger.warning(
                "Corrupt %s data at %s (expected a JSON array, got %s); falling back to seed data",
                self.name,
                self.path,
                type(data).__name__,
            )
            return self.seed()
        return data

    def save(self, items: list[Any]) -> None:
        """Replace the whole file. Write errors propagate to the caller."""
        payload = json.dumps(items, ensure_ascii=False, indent=2)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError:
            logger.exception("Failed to write %s data to %s", self.name, self.path)
            raise
        finally:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)

    @contextmanager
    def locked(self) -> Iterator["JsonContainer"]:
        """Single-writer section for a load-modify-save sequence."""
        with self._lock:
            yield self


def product_store(data_dir: Path) -> JsonContainer:
    return JsonContainer(Path(data_dir) / PRODUCTS_FILE, SEED_PRODUCTS)


def user_store(data_dir: Path) -> JsonContainer:
    return JsonContainer(Path(data_dir) / USERS_FILE, [])


@dataclass
class Storage:
    products: JsonContainer
    users: JsonContainer

    @classmethod
    def at(cls, data_dir: Path) -> "Storage":
        return cls(products=product_store(data_dir), users=user_store(data_dir))
