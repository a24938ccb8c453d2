"""Domain-level exceptions.

Store operations signal rejected requests with subclasses of
``CatalogError`` so the route handlers can map them onto HTTP status
codes in one place.
"""


class CatalogError(Exception):
    """Base class for all catalogue errors."""


class ValidationError(CatalogError):
    """Required product fields are missing."""


class NotFoundError(CatalogError):
    """No product has the requested id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found.")
        self.product_id = product_id
