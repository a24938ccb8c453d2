"""Liveness endpoint."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from product_catalog_api.app.api.deps import get_product_store
from product_catalog_api.app.services.product_store import ProductStore

router = APIRouter()


@router.get("/health")
async def health_check(store: ProductStore = Depends(get_product_store)) -> Dict[str, Any]:
    return {"status": "ok", "products": len(store)}
