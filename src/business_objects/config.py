from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union


# -------------------------
# Products (catalog) config
# -------------------------

@dataclass
class ProductGenConfig:
    """
    Controls generation of the product catalog.
    """
    num_products: int = 12
    price: Tuple[float, float] = (1.0, 250.0)

    def validate(self) -> None:
        if self.num_products < 1:
            raise ValueError("products.num_products must be >= 1.")
        lo, hi = self.price
        if not (0 <= lo <= hi):
            raise ValueError("products.price must satisfy 0 <= min <= max.")


# -------------------------
# Customers config
# -------------------------

@dataclass
class CustomerGenConfig:
    """
    Controls generation of customers.
    Each customer is placed in a city drawn uniformly from `cities`.
    """
    num_customers: int = 8
    cities: Tuple[str, ...] = ("Berlin", "Tokyo", "Lima", "Oslo")

    def validate(self) -> None:
        if self.num_customers < 0:
            raise ValueError("customers.num_customers must be >= 0.")
        if not self.cities:
            raise ValueError("customers.cities must not be empty.")
        if len(set(self.cities)) != len(self.cities):
            raise ValueError("customers.cities must not contain duplicates.")


# -------------------------
# Orders config
# -------------------------

@dataclass
class OrderGenConfig:
    """
    Controls generation of orders.
    - orders_per_customer: inclusive range of orders per customer
    - products_per_order: inclusive range of product lines per order
      (drawn with replacement, so a product may repeat inside an order)
    - delivered_ratio: probability that an order is delivered
    """
    orders_per_customer: Tuple[int, int] = (0, 4)
    products_per_order: Tuple[int, int] = (1, 4)
    delivered_ratio: float = 0.6

    def validate(self) -> None:
        a, b = self.orders_per_customer
        if not (0 <= a <= b):
            raise ValueError("orders.orders_per_customer must satisfy 0 <= min <= max.")
        a, b = self.products_per_order
        if not (1 <= a <= b):
            raise ValueError("orders.products_per_order must satisfy 1 <= min <= max.")
        if not (0.0 <= self.delivered_ratio <= 1.0):
            raise ValueError("orders.delivered_ratio must be in [0,1].")


# -------------------------
# Top-level shop config
# -------------------------

@dataclass
class ShopGenConfig:
    """
    Top-level configuration for shop generation.

    Sub-configs can be passed either as dataclass instances OR as plain dicts:

        ShopGenConfig(
            seed=7,
            products=dict(num_products=10, price=(2.0, 90.0)),
            customers=dict(num_customers=5, cities=("Oslo", "Lima")),
            orders=dict(orders_per_customer=(1, 3), delivered_ratio=0.5),
        )
    """
    seed: int = 123
    name: str = "Koan Shop"
    products: Union[ProductGenConfig, dict] = field(default_factory=ProductGenConfig)
    customers: Union[CustomerGenConfig, dict] = field(default_factory=CustomerGenConfig)
    orders: Union[OrderGenConfig, dict] = field(default_factory=OrderGenConfig)

    # Coerce dicts → dataclasses for nested configs
    def __post_init__(self):
        if isinstance(self.products, dict):
            self.products = ProductGenConfig(**self.products)
        if isinstance(self.customers, dict):
            self.customers = CustomerGenConfig(**self.customers)
        if isinstance(self.orders, dict):
            self.orders = OrderGenConfig(**self.orders)

    def validate(self) -> None:
        if not isinstance(self.seed, int):
            raise ValueError("seed must be an integer.")
        if not self.name:
            raise ValueError("name must be a non-empty string.")
        self.products.validate()
        self.customers.validate()
        self.orders.validate()
