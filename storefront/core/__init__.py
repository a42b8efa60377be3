"""
Core utilities shared across the storefront backend.

Configuration, logging setup, id/token generation and password helpers live
here so services and routers do not read os.environ or roll their own ids.
"""
