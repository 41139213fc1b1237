from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .common import require_dict, require_key, require_list
from .product import Product


@dataclass(frozen=True)
class Order:
    """
    A single order placed by a customer.

    Fields
    -------
    products : tuple of Product
        Ordered products. The same product may appear several times, and the
        same product may appear in many orders.
    is_delivered : bool
        Delivery flag used by the partition and "delivered only" queries.
    """

    products: Tuple[Product, ...]
    is_delivered: bool

    # ------------------------------------------------------------------ #
    # Validation
    # ------------------------------------------------------------------ #

    def __post_init__(self) -> None:
        products = tuple(self.products)
        for p in products:
            if not isinstance(p, Product):
                raise TypeError(f"Order products must be Product instances, got {type(p).__name__}.")
        # frozen dataclass: coerce lists to tuples so the order stays hashable
        object.__setattr__(self, "products", products)
        object.__setattr__(self, "is_delivered", bool(self.is_delivered))

    # ------------------------------------------------------------------ #
    # Convenience
    # ------------------------------------------------------------------ #

    def total_price(self) -> float:
        return float(sum(p.price for p in self.products))

    # ------------------------------------------------------------------ #
    # JSON constructors
    # ------------------------------------------------------------------ #
    @classmethod
    def from_json(cls, data: dict) -> "Order":
        """
        Build an Order from a JSON dict.

        Expected keys (others are ignored):
            - "products": [{"name": str, "price": float}, ...]
            - "is_delivered" (or "delivered"): bool, defaults to False
        """
        require_dict(data, record="order")
        raw_products = require_list(require_key(data, "products", record="order"),
                                    record="order", field_name="products")

        delivered = data.get("is_delivered", data.get("delivered", False))
        if not isinstance(delivered, bool):
            raise TypeError(f"order JSON 'is_delivered' must be a bool, got {delivered!r}")
        return cls(
            products=tuple(Product.from_json(p) for p in raw_products),
            is_delivered=delivered,
        )

    def to_json(self) -> dict:
        return {
            "products": [p.to_json() for p in self.products],
            "is_delivered": self.is_delivered,
        }


def load_orders_from_json_list(json_list: Iterable[dict]) -> List[Order]:
    return [Order.from_json(rec) for rec in json_list]
