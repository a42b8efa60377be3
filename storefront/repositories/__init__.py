"""
Persistence adapters.

Today every collection is a JSON file; services only depend on the
load/save/locked surface of a container.
"""

from .json_storage import JsonContainer, Storage, product_store, user_store

__all__ = ["JsonContainer", "Storage", "product_store", "user_store"]
