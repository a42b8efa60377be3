"""
FastAPI routers grouped by concern (admin auth, products, users, pages).

Each module exposes an APIRouter included by the app factory; handlers only
translate HTTP to service calls and service results back to HTTP.
"""
