"""Domain helpers for product input normalization."""
from __future__ import annotations

import math
from typing import Any, Mapping

TEXT_FIELDS = ("category", "description", "image")


def clean_text(value: Any) -> str:
    """Trimmed string, or "" for anything that is not a string."""
    return value.strip() if isinstance(value, str) else ""


def coerce_price(value: Any) -> int | float | None:
    """
    Return a finite, non-negative price or None when the value is not usable.

    Numbers and numeric strings are accepted; integral values come back as int.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        raw = value.strip()
        if not raw or "_" in raw:
            return None
        try:
            number = float(raw)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return int(number) if number.is_integer() else number


def build_product(product_id: str, payload: Mapping[str, Any]) -> dict:
    """Create a product record from a request payload whose name was already validated."""
    price = coerce_price(payload.get("price"))
    product = {
        "id": product_id,
        "name": clean_text(payload.get("name")),
        "price": 0 if price is None else price,
    }
    for field in TEXT_FIELDS:
        product[field] = clean_text(payload.get(field))
    return product


def merge_product(current: Mapping[str, Any], payload: Mapping[str, Any]) -> dict:
    """
    Partial update: text fields change only for non-empty strings after trimming,
    price only for a valid price. The id is never taken from the payload.
    """
    merged = dict(current)
    for field in ("name",) + TEXT_FIELDS:
        candidate = clean_text(payload.get(field))
        if candidate:
            merged[field] = candidate
    price = coerce_price(payload.get("price"))
    if price is not None:
        merged["price"] = price
    merged["id"] = current.get("id")
    return merged


def has_valid_name(payload: Mapping[str, Any]) -> bool:
    return bool(clean_text(payload.get("name")))
