# src/business_objects/generators.py
from __future__ import annotations

import json
import logging
import os
import random
from pathlib import Path
from typing import List, Union

from .common import City
from .product import Product
from .customer_order import Order
from .customer import Customer
from .shop import Shop, load_shop_from_json
from .config import ShopGenConfig

logger = logging.getLogger(__name__)

SHOP_FILENAME = "shop.json"


# -------------------------------------------------------------------
# Public API
# -------------------------------------------------------------------

def make_shop(cfg: ShopGenConfig) -> Shop:
    """
    Generate a complete synthetic shop guided by `cfg`.

    Steps:
      1) Product catalog
      2) Customers (each placed in one of the configured cities)
      3) Orders per customer (products drawn with replacement, delivered flag)

    The same seed always yields the same shop.
    """
    cfg.validate()
    rng = random.Random(cfg.seed)

    products = _gen_products(rng, cfg)
    customers = _gen_customers(rng, cfg, products=products)

    shop = Shop(name=cfg.name, customers=tuple(customers))
    logger.debug(
        "Generated shop %r: %d products, %d customers, %d orders (seed=%d)",
        shop.name, len(products), len(customers),
        sum(len(c.orders) for c in customers), cfg.seed,
    )
    return shop


# -------------------------------------------------------------------
# Products
# -------------------------------------------------------------------

def _gen_products(rng: random.Random, cfg: ShopGenConfig) -> List[Product]:
    pcfg = cfg.products
    products: List[Product] = []
    for i in range(1, pcfg.num_products + 1):
        products.append(
            Product(
                name=f"Product_{i}",
                price=round(rng.uniform(*pcfg.price), 2),
            )
        )
    return products


# -------------------------------------------------------------------
# Customers + orders
# -------------------------------------------------------------------

def _gen_orders(rng: random.Random, cfg: ShopGenConfig, *, products: List[Product]) -> List[Order]:
    ocfg = cfg.orders
    orders: List[Order] = []
    for _ in range(rng.randint(*ocfg.orders_per_customer)):
        k_lines = rng.randint(*ocfg.products_per_order)
        orders.append(
            Order(
                products=tuple(rng.choice(products) for _ in range(k_lines)),
                is_delivered=(rng.random() < ocfg.delivered_ratio),
            )
        )
    return orders


def _gen_customers(rng: random.Random, cfg: ShopGenConfig, *, products: List[Product]) -> List[Customer]:
    ccfg = cfg.customers
    cities = [City(name) for name in ccfg.cities]
    customers: List[Customer] = []
    for i in range(1, ccfg.num_customers + 1):
        customers.append(
            Customer(
                name=f"Customer_{i}",
                city=rng.choice(cities),
                orders=tuple(_gen_orders(rng, cfg, products=products)),
            )
        )
    return customers


# -------------------------------------------------------------------
# JSON helpers
# -------------------------------------------------------------------

def export_as_jsonable_dict(shop: Shop) -> dict:
    """Convert the shop graph into plain dicts/lists so it can be dumped to JSON."""
    return shop.to_json()


def save_shop_json(shop: Shop, output_dir: str) -> str:
    """
    Save a shop as `shop.json` inside `output_dir` (created if missing).
    Returns the path of the written file.
    """
    os.makedirs(output_dir, exist_ok=True)
    filename = os.path.join(output_dir, SHOP_FILENAME)
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(export_as_jsonable_dict(shop), f, indent=2, ensure_ascii=False)
    logger.info("Saved shop %r with %d customers to %s", shop.name, len(shop.customers), filename)
    return filename


def load_shop_json(path: Union[str, Path]) -> Shop:
    """
    Load a shop from a JSON file, or from `shop.json` inside a directory.
    """
    p = Path(path)
    if p.is_dir():
        p = p / SHOP_FILENAME
    if not p.exists():
        raise FileNotFoundError(f"{p} not found")

    with p.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise TypeError(f"{p}: top-level JSON must be an object with 'name' and 'customers'")

    shop = load_shop_from_json(data)
    logger.info("Loaded shop %r with %d customers from %s", shop.name, len(shop.customers), p)
    return shop
