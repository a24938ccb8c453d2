"""Page slicing for query results."""

from typing import List, Sequence, Tuple, TypeVar

from ..schemas.query import DEFAULT_LIMIT, DEFAULT_PAGE


T = TypeVar("T")


def paginate(items: Sequence[T], page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> Tuple[List[T], int]:
    """Return the items of 1‑based ``page`` and the total number of items.

    ``total`` counts every item passed in, not just the returned page.
    A page past the end is empty.  ``page < 1`` is read as the first
    page and ``limit < 1`` as the default limit.
    """
    page = max(page, 1)
    if limit < 1:
        limit = DEFAULT_LIMIT
    start = (page - 1) * limit
    return list(items[start:start + limit]), len(items)
