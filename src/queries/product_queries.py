# src/queries/product_queries.py
from __future__ import annotations

from math import fsum
from typing import Iterator, List, Optional, Set

from src.business_objects.customer import Customer
from src.business_objects.product import Product
from src.business_objects.shop import Shop


# ───────────────────────────── flat map ───────────────────────────── #

def get_customer_ordered_products(customer: Customer) -> List[Product]:
    """All products the customer ordered, cheapest first (stable for equal prices)."""
    return sorted(customer.ordered_products(), key=lambda p: p.price)


def get_ordered_products(shop: Shop) -> Set[Product]:
    """Products ordered by at least one customer."""
    return {p for c in shop.customers for o in c.orders for p in o.products}


# ───────────────────────────── fold ───────────────────────────── #

def get_products_ordered_by_all(shop: Shop) -> Set[Product]:
    """
    Products that every customer ordered at least once.

    Folds set intersection over the customers starting from the union of all
    ordered products, so a shop without customers returns that (empty) union.
    """
    ordered_by_all = get_ordered_products(shop)
    for customer in shop.customers:
        ordered_by_all = ordered_by_all.intersection(customer.ordered_products())
    return ordered_by_all


# ───────────────────────────── max / sum ───────────────────────────── #

def get_most_expensive_product_by(customer: Customer) -> Optional[Product]:
    return max(customer.ordered_products(), key=lambda p: p.price, default=None)


def money_spent_by(customer: Customer) -> float:
    """Sum of prices of everything the customer ordered (0.0 if nothing)."""
    return fsum(p.price for p in customer.ordered_products())


# ───────────────────────────── sequences ───────────────────────────── #

def _delivered_products(customer: Customer) -> Iterator[Product]:
    for order in customer.orders:
        if order.is_delivered:
            yield from order.products


def find_most_expensive_product_by(customer: Customer) -> Optional[Product]:
    """
    Most expensive product among the customer's *delivered* orders.
    Evaluated lazily; None when nothing was delivered.
    """
    return max(_delivered_products(customer), key=lambda p: p.price, default=None)


def get_number_of_times_product_was_ordered(shop: Shop, product: Product) -> int:
    """
    How many times a product was ordered across the whole shop.
    Matches by product name and counts repeats inside a single order.
    """
    all_products = (p for c in shop.customers for o in c.orders for p in o.products)
    return sum(1 for p in all_products if p.name == product.name)
