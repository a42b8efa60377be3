"""Storefront backend: product catalog, admin sessions and visitor accounts."""

__version__ = "1.0.0"
