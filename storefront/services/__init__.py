"""
High-level use cases for the storefront.

Routers call these services instead of touching the JSON files or the session
registry directly.
"""
