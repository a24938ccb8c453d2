"""
Pydantic models for product data.

``Product`` is the stored and returned representation.  ``ProductCreate``
and ``ProductUpdate`` describe request bodies; every field is optional on
both so that the store, not the framework, decides which fields are
required on creation.  The image URL travels as ``imageUrl`` on the wire
and is exposed as ``image_url`` in Python.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ProductBase(BaseModel):
    name: Optional[str] = Field(None, example="Wireless Headphones")
    price: Optional[float] = Field(None, example=250)
    brand: Optional[str] = Field(None, example="AudioLux")
    category: Optional[str] = Field(None, example="Electronics")
    image_url: Optional[str] = Field(
        None,
        alias="imageUrl",
        example="https://placehold.co/400x400/1e293b/d1d5db?text=Headphones",
    )

    model_config = {
        "populate_by_name": True,
    }


class ProductCreate(ProductBase):
    """Schema for creating a product.

    ``name`` and ``price`` are checked for presence by the store.
    """
    pass


class ProductUpdate(ProductBase):
    """Schema for updating a product.

    All fields are optional; only fields sent by the client are merged
    over the stored record.  Any ``id`` in the body is ignored.
    """
    pass


class Product(ProductBase):
    """Schema for reading a product from the API."""

    id: int
    name: str
    price: float


class ProductPage(BaseModel):
    """One page of products plus the number of products matching the query."""

    products: List[Product]
    total: int
