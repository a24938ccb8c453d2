"""
Query specifications for listing products.

``FilterSpec`` narrows the catalogue, ``SortOrder`` names the ordering
applied after filtering and ``PageSpec`` selects a slice of the result.
Each has a ``parse`` constructor that accepts the raw query string
values; malformed numbers are ignored or defaulted rather than rejected.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 9

_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def parse_number(raw: Optional[str]) -> Optional[float]:
    """Parse the leading decimal number of ``raw``.

    ``"10"`` and ``"10abc"`` both give ``10.0``; ``"abc"``, ``""`` and
    ``None`` give ``None``.
    """
    if raw is None:
        return None
    match = _FLOAT_PREFIX.match(str(raw))
    if not match:
        return None
    return float(match.group(1))


def parse_integer(raw: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``raw`` (``"2.7"`` gives ``2``)."""
    if raw is None:
        return None
    match = _INT_PREFIX.match(str(raw))
    if not match:
        return None
    return int(match.group(1))


class SortOrder(str, Enum):
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    BRAND_ASC = "brand-asc"
    BRAND_DESC = "brand-desc"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["SortOrder"]:
        """Return the matching order, or ``None`` for missing/unknown values."""
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(frozen=True)
class FilterSpec:
    """Optional predicates; ``None`` or empty fields impose no constraint."""

    brand: Optional[str] = None
    category: Optional[str] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    search: Optional[str] = None

    @classmethod
    def parse(
        cls,
        brand: Optional[str] = None,
        category: Optional[str] = None,
        price_min: Optional[str] = None,
        price_max: Optional[str] = None,
        search: Optional[str] = None,
    ) -> "FilterSpec":
        return cls(
            brand=brand or None,
            category=category or None,
            price_min=parse_number(price_min),
            price_max=parse_number(price_max),
            search=search or None,
        )


@dataclass(frozen=True)
class PageSpec:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def parse(cls, page: Optional[str] = None, limit: Optional[str] = None) -> "PageSpec":
        """Build a page spec from raw values.

        Missing, non-numeric or zero values fall back to the defaults.
        A negative page is treated as the first page and a negative
        limit as the default limit.
        """
        page_num = parse_integer(page) or DEFAULT_PAGE
        limit_num = parse_integer(limit) or DEFAULT_LIMIT
        return cls(
            page=max(page_num, 1),
            limit=limit_num if limit_num > 0 else DEFAULT_LIMIT,
        )
