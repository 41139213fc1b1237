# src/queries/customer_queries.py
from __future__ import annotations

import logging
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

from src.business_objects.common import City
from src.business_objects.customer import Customer
from src.business_objects.shop import Shop

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


# ───────────────────────────── helpers ───────────────────────────── #

def _lives_in(customer: Customer, city: City) -> bool:
    # city match is by exact (case-sensitive) name
    return customer.city.name == city.name


def _undelivered_count(customer: Customer) -> int:
    return sum(1 for o in customer.orders if not o.is_delivered)


def _delivered_count(customer: Customer) -> int:
    return sum(1 for o in customer.orders if o.is_delivered)


def _build_map(
    customers: Iterable[Customer],
    key: Callable[[Customer], K],
    value: Callable[[Customer], V],
    *,
    strict: bool,
    what: str,
) -> Dict[K, V]:
    """
    Associate customers into a dict.
    Duplicate keys: last write wins, or ValueError when `strict`.
    """
    out: Dict[K, V] = {}
    for c in customers:
        k = key(c)
        if k in out:
            if strict:
                raise ValueError(f"{what}: duplicate key {k!r}.")
            logger.debug("%s: key %r seen again, overwriting", what, k)
        out[k] = value(c)
    return out


# ───────────────────────────── introduction ───────────────────────────── #

def get_set_of_customers(shop: Shop) -> Set[Customer]:
    return set(shop.customers)


# ───────────────────────────── sort ───────────────────────────── #

def get_customers_sorted_by_orders(shop: Shop) -> List[Customer]:
    """Customers by number of orders, descending. Ties keep input order."""
    return sorted(shop.customers, key=lambda c: len(c.orders), reverse=True)


# ───────────────────────────── filter / map ───────────────────────────── #

def get_customer_cities(shop: Shop) -> Set[City]:
    return {c.city for c in shop.customers}


def get_customers_from(shop: Shop, city: City) -> List[Customer]:
    return [c for c in shop.customers if _lives_in(c, city)]


# ───────────────────────────── predicates ───────────────────────────── #

def check_all_customers_are_from(shop: Shop, city: City) -> bool:
    return all(_lives_in(c, city) for c in shop.customers)


def has_customer_from(shop: Shop, city: City) -> bool:
    return any(_lives_in(c, city) for c in shop.customers)


def count_customers_from(shop: Shop, city: City) -> int:
    return sum(1 for c in shop.customers if _lives_in(c, city))


def find_customer_from(shop: Shop, city: City) -> Optional[Customer]:
    return next((c for c in shop.customers if _lives_in(c, city)), None)


# ───────────────────────────── max / min ───────────────────────────── #

def get_customer_with_max_orders(shop: Shop) -> Optional[Customer]:
    """
    Customer with the most orders, or None for a shop without customers.
    `max` keeps the first maximal element, so ties go to the earliest customer.
    """
    return max(shop.customers, key=lambda c: len(c.orders), default=None)


# ───────────────────────────── associate ───────────────────────────── #

def name_to_customer_map(shop: Shop, *, strict: bool = False) -> Dict[str, Customer]:
    return _build_map(shop.customers, lambda c: c.name, lambda c: c,
                      strict=strict, what="name_to_customer_map")


def customer_to_city_map(shop: Shop, *, strict: bool = False) -> Dict[Customer, City]:
    return _build_map(shop.customers, lambda c: c, lambda c: c.city,
                      strict=strict, what="customer_to_city_map")


def customer_name_to_city_map(shop: Shop, *, strict: bool = False) -> Dict[str, City]:
    return _build_map(shop.customers, lambda c: c.name, lambda c: c.city,
                      strict=strict, what="customer_name_to_city_map")


# ───────────────────────────── group by ───────────────────────────── #

def group_customers_by_city(shop: Shop) -> Dict[City, List[Customer]]:
    """
    Customers grouped by city. Keys appear in first-seen order and each
    group keeps the shop's customer order.
    """
    groups: Dict[City, List[Customer]] = {}
    for c in shop.customers:
        groups.setdefault(c.city, []).append(c)
    return groups


# ───────────────────────────── partition ───────────────────────────── #

def partition_customers_by_undelivered(shop: Shop) -> Tuple[List[Customer], List[Customer]]:
    """
    Split customers into (more undelivered than delivered, the rest).
    A customer with equal counts lands in the second group.
    """
    more: List[Customer] = []
    rest: List[Customer] = []
    for c in shop.customers:
        (more if _undelivered_count(c) > _delivered_count(c) else rest).append(c)
    return more, rest


def get_customers_with_more_undelivered_orders(shop: Shop) -> Set[Customer]:
    more, _ = partition_customers_by_undelivered(shop)
    return set(more)
