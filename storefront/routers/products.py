from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from storefront.routers.deps import get_product_service, json_body
from storefront.services.product_service import ProductService
from storefront.services.session_service import require_admin

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
def list_products(service: ProductService = Depends(get_product_service)):
    """Public, read-only catalog."""
    return service.list_products()


@router.post("", dependencies=[Depends(require_admin)])
def create_product(
    payload: dict = Depends(json_body),
    service: ProductService = Depends(get_product_service),
):
    product = service.create_product(payload)
    if product is None:
        raise HTTPException(400, "Name is required")
    return JSONResponse(product, status_code=201)


@router.put("/{product_id}", dependencies=[Depends(require_admin)])
def update_product(
    product_id: str,
    payload: dict = Depends(json_body),
    service: ProductService = Depends(get_product_service),
):
    product = service.update_product(product_id, payload)
    if product is None:
        raise HTTPException(404, "Product not found")
    return product


@router.delete("/{product_id}", dependencies=[Depends(require_admin)])
def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    removed = service.delete_product(product_id)
    if removed is None:
        raise HTTPException(404, "Product not found")
    return {"ok": True, "removed": removed}
