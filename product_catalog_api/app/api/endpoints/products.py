"""
Product endpoints.

These routes expose CRUD operations over the in‑memory catalogue.  The
listing endpoint takes every query parameter as raw text so that
malformed numbers (``priceMin=abc``, ``page=x``) are ignored or
defaulted instead of producing a validation error.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from product_catalog_api.app.api.deps import get_product_store
from product_catalog_api.app.core.exceptions import NotFoundError, ValidationError
from product_catalog_api.app.schemas.product import Product, ProductCreate, ProductPage, ProductUpdate
from product_catalog_api.app.schemas.query import FilterSpec, PageSpec, SortOrder
from product_catalog_api.app.services import query_engine
from product_catalog_api.app.services.paginator import paginate
from product_catalog_api.app.services.product_store import ProductStore


router = APIRouter()


@router.get("", response_model=ProductPage)
async def list_products(
    brand: Optional[str] = Query(None, description="Exact brand, case-insensitive"),
    category: Optional[str] = Query(None, description="Exact category, case-insensitive"),
    price_min: Optional[str] = Query(None, alias="priceMin", description="Inclusive lower price bound"),
    price_max: Optional[str] = Query(None, alias="priceMax", description="Inclusive upper price bound"),
    search: Optional[str] = Query(None, description="Substring of name, brand or category"),
    sort: Optional[str] = Query(None, description="price-asc, price-desc, brand-asc or brand-desc"),
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    limit: Optional[str] = Query(None, description="Page size (default 9)"),
    store: ProductStore = Depends(get_product_store),
) -> ProductPage:
    """Return one page of products matching the filters.

    - **brand**, **category** — exact matches, case‑insensitive.
    - **priceMin**, **priceMax** — inclusive bounds; non‑numeric values are ignored.
    - **search** — case‑insensitive substring of name, brand or category.
    - **sort** — ``price-asc``, ``price-desc``, ``brand-asc``, ``brand-desc``; anything else keeps catalogue order.
    - **page**, **limit** — pagination; ``total`` is the number of matches before slicing.
    """
    filters = FilterSpec.parse(
        brand=brand,
        category=category,
        price_min=price_min,
        price_max=price_max,
        search=search,
    )
    page_spec = PageSpec.parse(page=page, limit=limit)
    matches = query_engine.apply(store.list(), filters, SortOrder.parse(sort))
    items, total = paginate(matches, page_spec.page, page_spec.limit)
    return ProductPage(products=items, total=total)


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductCreate,
    store: ProductStore = Depends(get_product_store),
) -> Product:
    """Create a product.  ``name`` and ``price`` are required."""
    try:
        return store.create(product)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: int,
    updates: ProductUpdate,
    store: ProductStore = Depends(get_product_store),
) -> Product:
    """Update an existing product.

    Partial updates are supported; unspecified fields remain unchanged
    and the id in the path always wins over one in the body.
    """
    try:
        return store.update(product_id, updates)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_product(
    product_id: int,
    store: ProductStore = Depends(get_product_store),
) -> Response:
    """Delete a product."""
    try:
        store.delete(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
