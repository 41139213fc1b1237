from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from .common import require_dict, require_key


@dataclass(frozen=True)
class Product:
    """
    Catalog product.

    Notes
    -----
    - Products are plain values: two instances with the same name and price
      are equal and collapse in sets.
    - Counting queries match on `name` only, so differently priced products
      sharing a name still count as the same product there.
    """
    name: str
    price: float

    def __post_init__(self) -> None:
        if isinstance(self.price, bool) or not isinstance(self.price, Real):
            raise TypeError(f"Product '{self.name}': price must be a number, got {self.price!r}.")
        if self.price < 0:
            raise ValueError(f"Product '{self.name}': price must be >= 0, got {self.price}.")

    @classmethod
    def from_json(cls, data: dict) -> "Product":
        """Expects {"name": str, "price": number}; other keys are ignored."""
        require_dict(data, record="product")
        name = str(require_key(data, "name", record="product"))
        price = require_key(data, "price", record="product")
        if isinstance(price, bool) or not isinstance(price, Real):
            raise TypeError(f"product JSON 'price' must be a number, got {price!r}: {data!r}")
        return cls(name=name, price=float(price))

    def to_json(self) -> dict:
        return {"name": self.name, "price": float(self.price)}
