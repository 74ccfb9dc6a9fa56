"""JSON API routes: /health, /api/products."""


import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response

from ...config import get_settings
from ...logging import product_to_loggable
from ..repository import ProductRepository
from ..schemas import ProductRequest

settings = get_settings()
router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def _repository(request: Request) -> ProductRepository:
    return request.app.state.repository


def _not_found(product_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Product {product_id} not found")


@router.get("/health")
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


@router.get("/api/products")
def list_products(request: Request) -> list[dict[str, Any]]:
    return [product.to_payload() for product in _repository(request).all()]


@router.get("/api/products/{product_id}")
def get_product(product_id: int, request: Request) -> dict[str, Any]:
    product = _repository(request).get(product_id)
    if product is None:
        raise _not_found(product_id)
    return product.to_payload()


@router.post("/api/products", status_code=201)
def create_product(payload: ProductRequest, request: Request) -> dict[str, Any]:
    product = _repository(request).add(payload.name, payload.description, payload.price)
    logger.debug("Created product %s: %s", product.id, product_to_loggable(product))
    return product.to_payload()


@router.put("/api/products/{product_id}")
def update_product(product_id: int, payload: ProductRequest, request: Request) -> dict[str, Any]:
    product = _repository(request).replace(product_id, payload.name, payload.description, payload.price)
    if product is None:
        raise _not_found(product_id)
    logger.debug("Updated product %s: %s", product.id, product_to_loggable(product))
    return product.to_payload()


@router.delete("/api/products/{product_id}", status_code=204)
def delete_product(product_id: int, request: Request) -> Response:
    if not _repository(request).remove(product_id):
        raise _not_found(product_id)
    return Response(status_code=204)
