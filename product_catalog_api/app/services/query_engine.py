"""
Filtering and sorting of product snapshots.

``apply`` never mutates its input: it builds a new list holding the
products that satisfy every supplied filter, then orders it by the
requested ``SortOrder``.  Python's sort is stable, so products that
compare equal (and every product when no order is requested) keep their
original relative order.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from ..schemas.product import Product
from ..schemas.query import FilterSpec, SortOrder


logger = logging.getLogger(__name__)


def _norm(s: Optional[str]) -> str:
    return (s or "").lower()


def _brand_key(product: Product):
    # Case-insensitive first, so "audiolux" sits next to "AudioLux".
    brand = product.brand or ""
    return (brand.casefold(), brand)


def _matches_search(product: Product, term: str) -> bool:
    return (
        term in _norm(product.name)
        or term in _norm(product.brand)
        or term in _norm(product.category)
    )


def build_predicates(filters: FilterSpec) -> List[Callable[[Product], bool]]:
    """Return one predicate per filter field that is set."""
    predicates: List[Callable[[Product], bool]] = []
    if filters.brand:
        brand = filters.brand.lower()
        predicates.append(lambda p: _norm(p.brand) == brand)
    if filters.category:
        category = filters.category.lower()
        predicates.append(lambda p: _norm(p.category) == category)
    if filters.price_min is not None:
        price_min = filters.price_min
        predicates.append(lambda p: p.price >= price_min)
    if filters.price_max is not None:
        price_max = filters.price_max
        predicates.append(lambda p: p.price <= price_max)
    if filters.search:
        term = filters.search.lower()
        predicates.append(lambda p: _matches_search(p, term))
    return predicates


def filter_products(products: Sequence[Product], filters: FilterSpec) -> List[Product]:
    predicates = build_predicates(filters)
    return [p for p in products if all(pred(p) for pred in predicates)]


def sort_products(products: Sequence[Product], order: Optional[SortOrder]) -> List[Product]:
    if order is SortOrder.PRICE_ASC:
        return sorted(products, key=lambda p: p.price)
    if order is SortOrder.PRICE_DESC:
        return sorted(products, key=lambda p: p.price, reverse=True)
    if order is SortOrder.BRAND_ASC:
        return sorted(products, key=_brand_key)
    if order is SortOrder.BRAND_DESC:
        return sorted(products, key=_brand_key, reverse=True)
    return list(products)


def apply(
    products: Sequence[Product],
    filters: Optional[FilterSpec] = None,
    order: Optional[SortOrder] = None,
) -> List[Product]:
    """Filter ``products`` conjunctively, then sort the survivors."""
    result = filter_products(products, filters or FilterSpec())
    result = sort_products(result, order)
    logger.debug(
        "Query %s sort=%s matched %d of %d products",
        filters,
        order.value if order else None,
        len(result),
        len(products),
    )
    return result
