from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .common import City, require_dict, require_key, require_list
from .customer_order import Order, load_orders_from_json_list
from .product import Product


@dataclass(frozen=True)
class Customer:
    """
    Customer data.
    The customer *owns* its orders; `name` is assumed unique within a shop
    for lookups but nothing enforces it.
    """
    name: str
    city: City
    orders: Tuple[Order, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "orders", tuple(self.orders))

    def ordered_products(self) -> List[Product]:
        """All products across all orders, in order of appearance."""
        return [p for o in self.orders for p in o.products]

    @classmethod
    def from_json(cls, data: dict) -> "Customer":
        """
        Expected keys (others are ignored):
            - "name": str
            - "city": "Name" or {"name": "Name"}
            - "orders": list of order dicts, defaults to []
        """
        require_dict(data, record="customer")
        name = str(require_key(data, "name", record="customer"))
        # city errors carry their own "city JSON ..." message
        city = City.from_json(require_key(data, "city", record=f"customer {name!r}"))
        raw_orders = require_list(data.get("orders", []), record=f"customer {name!r}", field_name="orders")
        return cls(name=name, city=city, orders=tuple(load_orders_from_json_list(raw_orders)))

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "city": self.city.to_json(),
            "orders": [o.to_json() for o in self.orders],
        }
