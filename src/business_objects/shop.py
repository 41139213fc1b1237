from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .common import require_dict, require_list
from .customer import Customer


@dataclass(frozen=True)
class Shop:
    """
    Root of the query fixture graph: a named shop and its customers.
    Built once and never mutated, so every query over it is a pure read.
    """
    name: str
    customers: Tuple[Customer, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "customers", tuple(self.customers))

    @classmethod
    def from_json(cls, data: dict) -> "Shop":
        """
        Expected keys (others are ignored):
            - "name": str, defaults to ""
            - "customers": list of customer dicts, defaults to []
        """
        require_dict(data, record="shop")
        raw_customers = require_list(data.get("customers", []), record="shop", field_name="customers")
        return cls(
            name=str(data.get("name", "")),
            customers=tuple(Customer.from_json(c) for c in raw_customers),
        )

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "customers": [c.to_json() for c in self.customers],
        }


def load_shop_from_json(data: dict) -> Shop:
    return Shop.from_json(data)
