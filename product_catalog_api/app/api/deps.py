"""Shared FastAPI dependencies."""

from fastapi import Request

from product_catalog_api.app.services.product_store import ProductStore


def get_product_store(request: Request) -> ProductStore:
    """Return the store created for this application by ``create_app``."""
    return request.app.state.product_store
