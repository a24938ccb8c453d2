"""Entry point for serving the Product Catalog API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables through
``Settings`` (defaults ``0.0.0.0`` and ``3000``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Product API listening at http://localhost:%s%s/products", settings.port, settings.api_prefix
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
