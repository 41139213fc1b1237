"""
Domain model package for the shop exercises.

This package defines the core business objects:
- City
- Product
- Order
- Customer
- Shop
"""

from .common import City
from .product import Product
from .customer_order import Order
from .customer import Customer
from .shop import Shop, load_shop_from_json

__all__ = [
    # common
    "City",
    # entities
    "Product",
    "Order",
    "Customer",
    "Shop",
    # json
    "load_shop_from_json",
]
