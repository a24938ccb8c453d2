"""
Top‑level API router.

Aggregates the domain routers under a unified prefix.  The application
mounts it under ``settings.api_prefix``; the health check is mounted at
the root by ``main.create_app`` so probes do not depend on the prefix.
"""

from fastapi import APIRouter

from .endpoints import products


router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
