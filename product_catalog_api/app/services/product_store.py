"""
In‑memory product store.

``ProductStore`` owns the product collection and the assignment of new
ids.  Nothing is persisted: the collection lives for the lifetime of the
process and is seeded at application startup.  Route handlers never
touch the underlying list; they go through ``list``, ``get``,
``create``, ``update`` and ``delete``.

Ids are assigned one past the highest id the store has ever held (or 1
for a store that has never held a product), so an id freed by a delete
is never handed out again.  Every public method holds the store lock for
its whole duration because FastAPI may serve requests from several
threads.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from ..core.exceptions import NotFoundError, ValidationError
from ..schemas.product import Product, ProductCreate, ProductUpdate


logger = logging.getLogger(__name__)


class ProductStore:
    """Thread‑safe, process‑local collection of products."""

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._lock = threading.RLock()
        self._products: List[Product] = list(products or [])
        self._last_id = max((p.id for p in self._products), default=0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def reset(self, products: Iterable[Product]) -> None:
        """Replace the whole collection, e.g. with the seed catalogue."""
        with self._lock:
            self._products = list(products)
            self._last_id = max((p.id for p in self._products), default=0)
            logger.info("Product store reset with %d products", len(self._products))

    def list(self) -> List[Product]:
        """Return a snapshot of the collection in insertion order."""
        with self._lock:
            return list(self._products)

    def get(self, product_id: int) -> Optional[Product]:
        with self._lock:
            return next((p for p in self._products if p.id == product_id), None)

    def create(self, data: ProductCreate) -> Product:
        """Add a product and return it with its assigned id.

        Raises ``ValidationError`` when ``name`` is empty or ``price`` is
        missing.  A price of zero is accepted.
        """
        if not data.name or data.price is None:
            logger.warning("Rejected product without name or price")
            raise ValidationError("Product name and price are required.")
        with self._lock:
            product = Product(**data.model_dump(), id=self._next_id())
            self._products.append(product)
        logger.info("Created product %s '%s'", product.id, product.name)
        return product

    def update(self, product_id: int, patch: ProductUpdate) -> Product:
        """Merge ``patch`` over the stored product and return the result.

        Only fields the client sent are applied, and explicit ``null``
        values are skipped so required fields cannot be blanked.  The id
        always stays ``product_id``.  Raises ``NotFoundError`` when no
        product has that id.
        """
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                logger.warning("Update of unknown product %s", product_id)
                raise NotFoundError(product_id)
            changes["id"] = product_id
            updated = self._products[index].model_copy(update=changes)
            self._products[index] = updated
        logger.info("Updated product %s (%s)", product_id, ", ".join(sorted(changes)))
        return updated

    def delete(self, product_id: int) -> None:
        """Remove the product with ``product_id``.

        Raises ``NotFoundError`` if the collection did not shrink.
        """
        with self._lock:
            initial_length = len(self._products)
            self._products = [p for p in self._products if p.id != product_id]
            if len(self._products) == initial_length:
                logger.warning("Delete of unknown product %s", product_id)
                raise NotFoundError(product_id)
        logger.info("Deleted product %s", product_id)

    def _next_id(self) -> int:
        highest = max((p.id for p in self._products), default=0)
        self._last_id = max(self._last_id, highest) + 1
        return self._last_id

    def _index_of(self, product_id: int) -> Optional[int]:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None
