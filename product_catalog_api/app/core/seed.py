"""
Sample catalogue loaded into the store at startup.

The list mirrors the products shown by the dashboard front‑end.  Set
``SEED_PRODUCTS=false`` to start with an empty catalogue instead.
"""

from typing import List

from ..schemas.product import Product


_IMAGE_BASE = "https://placehold.co/400x400/1e293b/d1d5db?text="

SEED_PRODUCTS = [
    (1, "Luxury Perfume", 120, "Scentful", "Fragrances", "Perfume"),
    (2, "Wireless Headphones", 250, "AudioLux", "Electronics", "Headphones"),
    (3, "Premium Coffee Maker", 85, "BrewMaster", "Appliances", "Coffee+Maker"),
    (4, "Ergonomic Office Chair", 350, "ComfyHome", "Furniture", "Chair"),
    (5, "Smart Watch", 180, "TimeTech", "Electronics", "Watch"),
    (6, "Wool Blanket", 95, "CozyLiving", "Home Goods", "Blanket"),
    (7, "Leather Wallet", 60, "StitchCraft", "Accessories", "Wallet"),
    (8, "Bluetooth Speaker", 110, "AudioLux", "Electronics", "Speaker"),
    (9, "Chef's Knife Set", 220, "CutleryCo", "Kitchenware", "Knives"),
    (10, "Vintage Camera", 450, "PixelShot", "Electronics", "Camera"),
    (11, "Yoga Mat", 40, "ZenithFit", "Sports & Fitness", "Yoga+Mat"),
    (12, "Stainless Steel Water Bottle", 25, "EcoSip", "Home Goods", "Water+Bottle"),
    (13, "Digital Drawing Tablet", 300, "Creativio", "Electronics", "Tablet"),
    (14, "Organic Tea Set", 55, "Tealicious", "Food & Beverage", "Tea+Set"),
    (15, "Portable Power Bank", 70, "PowerOn", "Electronics", "Power+Bank"),
]


def seed_products() -> List[Product]:
    """Return fresh ``Product`` instances for the sample catalogue."""
    return [
        Product(
            id=product_id,
            name=name,
            price=price,
            brand=brand,
            category=category,
            image_url=_IMAGE_BASE + label,
        )
        for product_id, name, price, brand, category, label in SEED_PRODUCTS
    ]
