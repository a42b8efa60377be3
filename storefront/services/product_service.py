"""Product catalog use cases (list, create, partial update, delete)."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from storefront.core.utils import new_record_id
from storefront.domain.products import build_product, has_valid_name, merge_product
from storefront.repositories.json_storage import JsonContainer

logger = logging.getLogger(__name__)


def _find_index(products: list, product_id: str) -> int:
    for index, product in enumerate(products):
        if isinstance(product, dict) and product.get("id") == product_id:
            return index
    return -1


class ProductService:
    """Every mutation loads the whole catalog, changes it and writes it back under the container lock."""

    def __init__(self, products: JsonContainer) -> None:
        self.products = products

    def list_products(self) -> list[dict]:
        return self.products.load()

    def get_product(self, product_id: str) -> Optional[dict]:
        products = self.products.load()
        index = _find_index(products, product_id)
        return products[index] if index >= 0 else None

    def create_product(self, payload: Mapping[str, Any]) -> Optional[dict]:
        """Returns None when the payload has no usable name."""
        if not has_valid_name(payload):
            return None
        with self.products.locked():
            products = self.products.load()
            product_id = new_record_id("p")
            while _find_index(products, product_id) >= 0:
                product_id = new_record_id("p")
            product = build_product(product_id, payload)
            products.insert(0, product)
            self.products.save(products)
        logger.info("Created product %s (%s)", product["id"], product["name"])
        return product

    def update_product(self, product_id: str, payload: Mapping[str, Any]) -> Optional[dict]:
        """Returns None when no product has that id."""
        with self.products.locked():
            products = self.products.load()
            index = _find_index(products, product_id)
            if index < 0:
                return None
            products[index] = merge_product(products[index], payload)
            self.products.save(products)
            updated = products[index]
        logger.info("Updated product %s", product_id)
        return updated

    def delete_product(self, product_id: str) -> Optional[dict]:
        """Returns the removed product, or None when no product has that id."""
        with self.products.locked():
            products = self.products.load()
            index = _find_index(products, product_id)
            if index < 0:
                return None
            removed = products.pop(index)
            self.products.save(products)
        logger.info("Deleted product %s", product_id)
        return removed
