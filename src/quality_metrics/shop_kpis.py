# src/quality_metrics/shop_kpis.py
from __future__ import annotations

import csv
import os
from math import fsum
from typing import Dict, List

from src.business_objects.shop import Shop
from src.queries.customer_queries import group_customers_by_city
from src.queries.product_queries import money_spent_by


CITY_COLUMNS = ["city", "customers", "orders", "revenue"]


def _ratio(num: float, den: float) -> float:
    """num / den, or 0.0 when there is nothing to divide by."""
    if den <= 0:
        return 0.0
    return float(num) / float(den)


# ───────────────────────────── shop-level KPIs ───────────────────────────── #

def shop_kpis(shop: Shop) -> Dict[str, float]:
    """
    Day-level summary of a shop.

    Keys:
        num_customers, num_orders, num_delivered, num_cities,
        delivered_rate  = num_delivered / num_orders
        revenue         = ∑ price over every ordered product
        avg_order_value = revenue / num_orders
    """
    orders = [o for c in shop.customers for o in c.orders]
    num_orders = len(orders)
    num_delivered = sum(1 for o in orders if o.is_delivered)
    revenue = fsum(p.price for o in orders for p in o.products)

    return {
        "num_customers": len(shop.customers),
        "num_orders": num_orders,
        "num_delivered": num_delivered,
        "num_cities": len({c.city for c in shop.customers}),
        "delivered_rate": _ratio(num_delivered, num_orders),
        "revenue": float(revenue),
        "avg_order_value": _ratio(revenue, num_orders),
    }


# ───────────────────────────── per-city rows ───────────────────────────── #

def city_rows(shop: Shop) -> List[dict]:
    """One row per city (first-seen order) with customer, order and revenue totals."""
    rows: List[dict] = []
    for city, customers in group_customers_by_city(shop).items():
        rows.append({
            "city": city.name,
            "customers": len(customers),
            "orders": sum(len(c.orders) for c in customers),
            "revenue": float(fsum(money_spent_by(c) for c in customers)),
        })
    return rows


def export_city_csv(shop: Shop, filepath: str) -> str:
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CITY_COLUMNS)
        w.writeheader()
        for r in city_rows(shop):
            w.writerow(r)
    return filepath
