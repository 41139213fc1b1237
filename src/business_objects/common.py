from __future__ import annotations

from dataclasses import dataclass
from typing import Any


# -------------------------
# Helper: JSON shape checks
# -------------------------

def require_dict(data: Any, *, record: str) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"{record} JSON must be an object, got {type(data).__name__}: {data!r}")
    return data


def require_list(data: Any, *, record: str, field_name: str) -> list:
    if not isinstance(data, list):
        raise TypeError(f"{record} JSON '{field_name}' must be a list, got {type(data).__name__}")
    return data


def require_key(data: dict, key: str, *, record: str) -> Any:
    try:
        return data[key]
    except KeyError as e:
        raise KeyError(f"{record} JSON is missing {key!r}: {data!r}") from e


@dataclass(frozen=True)
class City:
    """
    A customer's location. Two cities are the same city when their names match,
    so `City` doubles as the grouping key for location queries.
    """
    name: str

    @classmethod
    def from_json(cls, data) -> "City":
        # Accept either {"name": "..."} or a bare string
        if isinstance(data, str):
            return cls(name=data)
        if not isinstance(data, dict):
            raise TypeError(f"city JSON must be a string or a dict with 'name', got {type(data).__name__}")
        return cls(name=str(require_key(data, "name", record="city")))

    def to_json(self) -> str:
        return self.name
