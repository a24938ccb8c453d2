"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with no configuration at all: it listens on port 3000,
mounts the product routes under ``/api`` and seeds the in‑memory
catalogue with the sample products.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console handler.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Prefix under which the product routes are mounted, e.g.
    # ``/api/products``.  Use an empty string to serve ``/products``.
    api_prefix: str = os.getenv("API_PREFIX", "/api").rstrip("/")

    # Comma‑separated list of allowed origins for CORS.  ``*`` allows
    # any origin, which is what the dashboard front‑end expects during
    # local development.
    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    # When false the store starts empty instead of holding the sample
    # catalogue.
    seed_products: bool = _env_bool("SEED_PRODUCTS", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
