"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application, sets up logging, CORS
and the in‑memory product store, and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn product_catalog_api.app.main:app --reload

The application title, version and route prefix are provided via
``Settings`` from ``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.seed import seed_products
from .api.router import router as api_router
from .api.endpoints import health
from .services.product_store import ProductStore


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds a fresh ``ProductStore``, seeded with the sample
    catalogue unless ``settings.seed_products`` is false, and attaches
    it to ``app.state`` where the route dependencies find it.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the store can
    # log while seeding.
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = ProductStore()
    if settings.seed_products:
        store.reset(seed_products())
    app.state.product_store = store

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix=settings.api_prefix)

    logger.info(
        "%s %s ready with %d products under '%s/products'",
        settings.project_name,
        settings.api_version,
        len(store),
        settings.api_prefix,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
