"""Product catalog API client.

This module defines a small client wrapper around the product REST API.
It uses the ``requests`` library internally and exposes one method per
operation:

* :meth:`list_products` – fetch a filtered, sorted page of products.
* :meth:`create_product` – add a product.
* :meth:`update_product` – patch an existing product.
* :meth:`delete_product` – remove a product.

Every method returns a ``(result, error)`` tuple.  On success ``error``
is ``None``; on failure ``result`` is empty and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.  HTTP and
network errors are logged, never raised.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ProductCatalogAPI:
    """Client for interacting with the product catalog API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            prefix: Route prefix the server mounts products under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the products prefix (e.g. ``/products``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``. On failure, ``data`` is ``None`` and ``error``
            describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("detail") or ""
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(
        self,
        *,
        brand: Optional[str] = None,
        category: Optional[str] = None,
        price_min: Optional[float] = None,
        price_max: Optional[float] = None,
        search: Optional[str] = None,
        sort: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Tuple[List[Dict[str, Any]], int, Optional[Error]]:
        """Retrieve one page of products.

        Returns:
            A tuple ``(products, total, error)``.  ``total`` is the number
            of products matching the filters across all pages.
        """
        params = {
            "brand": brand,
            "category": category,
            "priceMin": price_min,
            "priceMax": price_max,
            "search": search,
            "sort": sort,
            "page": page,
            "limit": limit,
        }
        params = {k: v for k, v in params.items() if v is not None}
        data, error = self._request("GET", "/products", params=params)
        if error:
            return [], 0, error
        data = data or {}
        return data.get("products", []), data.get("total", 0), None

    def create_product(self, product: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a product; ``product`` must hold ``name`` and ``price``."""
        return self._request("POST", "/products", json_body=product)

    def update_product(
        self, product_id: int, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Merge ``changes`` into the product with ``product_id``."""
        return self._request("PUT", f"/products/{product_id}", json_body=changes)

    def delete_product(self, product_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a product.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/products/{product_id}")
        return error is None, error
