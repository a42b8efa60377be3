"""Request helpers shared by the routers."""
from __future__ import annotations

from fastapi import Request

from storefront.services.auth_service import AdminAuthService
from storefront.services.product_service import ProductService
from storefront.services.user_service import UserService


async def json_body(request: Request) -> dict:
    """Parsed JSON object body; anything else (empty, malformed, non-object) reads as {}."""
    try:
        data = await request.json()
    except (ValueError, RecursionError):
        return {}
    return data if isinstance(data, dict) else {}


def get_admin_auth(request: Request) -> AdminAuthService:
    return request.app.state.admin_auth


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service
