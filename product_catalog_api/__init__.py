"""
Top‑level package for the Product Catalog API.

The HTTP application lives in ``app`` (``product_catalog_api.app.main``)
and a ``requests``‑based client for it in ``client``.
"""

__all__ = []
