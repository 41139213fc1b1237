"""Utility functions shared by the drivers: run the query catalogue and print it."""

from typing import Any, Dict

from src.business_objects.common import City
from src.business_objects.shop import Shop
from src.queries import customer_queries as cq
from src.queries import product_queries as pq


def run_query_catalogue(shop: Shop, city: City) -> Dict[str, Any]:
    """
    Evaluate every shop-level query once.
    `city` drives the filter/predicate queries.
    """
    more, rest = cq.partition_customers_by_undelivered(shop)
    top = cq.get_customer_with_max_orders(shop)
    return {
        "sorted_by_orders": [c.name for c in cq.get_customers_sorted_by_orders(shop)],
        "cities": sorted(c.name for c in cq.get_customer_cities(shop)),
        "customers_from": [c.name for c in cq.get_customers_from(shop, city)],
        "all_from": cq.check_all_customers_are_from(shop, city),
        "any_from": cq.has_customer_from(shop, city),
        "count_from": cq.count_customers_from(shop, city),
        "first_from": getattr(cq.find_customer_from(shop, city), "name", None),
        "max_orders": top.name if top else None,
        "groups": {k.name: [c.name for c in v] for k, v in cq.group_customers_by_city(shop).items()},
        "more_undelivered": [c.name for c in more],
        "rest": [c.name for c in rest],
        "ordered_products": sorted(p.name for p in pq.get_ordered_products(shop)),
        "ordered_by_all": sorted(p.name for p in pq.get_products_ordered_by_all(shop)),
        "spent": {c.name: pq.money_spent_by(c) for c in shop.customers},
    }


def print_report(report: Dict[str, Any]) -> None:
    width = max(len(k) for k in report) if report else 0
    for key, value in report.items():
        print(f"  {key:<{width}}  {value}")
