"""
Generate synthetic shops for the query exercises.

Usage:
    python -m scripts.generate_shop --output shops/shop_1 --seed 123
    python -m scripts.generate_shop --scenario small
    python -m scripts.generate_shop --scenario large --customers 50
"""

import argparse
import logging
from dataclasses import replace

from src.business_objects.config import ShopGenConfig
from src.business_objects.generators import make_shop, save_shop_json

# Predefined scenarios
SCENARIOS = {
    "small": ShopGenConfig(
        seed=42,
        name="Corner Shop",
        products=dict(num_products=6, price=(1.0, 40.0)),
        customers=dict(num_customers=4, cities=("Oslo", "Lima")),
        orders=dict(orders_per_customer=(0, 3), products_per_order=(1, 3), delivered_ratio=0.5),
    ),
    "medium": ShopGenConfig(
        seed=123,
        name="Koan Shop",
        products=dict(num_products=12, price=(1.0, 250.0)),
        customers=dict(num_customers=10, cities=("Berlin", "Tokyo", "Lima", "Oslo")),
        orders=dict(orders_per_customer=(0, 4), products_per_order=(1, 4), delivered_ratio=0.6),
    ),
    "large": ShopGenConfig(
        seed=999,
        name="Mega Store",
        products=dict(num_products=40, price=(0.5, 900.0)),
        customers=dict(num_customers=40, cities=("Berlin", "Tokyo", "Lima", "Oslo", "Cairo", "Quito")),
        orders=dict(orders_per_customer=(0, 8), products_per_order=(1, 6), delivered_ratio=0.7),
    ),
}


def main():
    parser = argparse.ArgumentParser(description="Generate a synthetic shop")
    parser.add_argument("--output", default="shops/shop_1", help="Output directory name")
    parser.add_argument("--scenario", choices=sorted(SCENARIOS), default="medium", help="Use predefined scenario")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--customers", type=int, help="Override number of customers")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = SCENARIOS[args.scenario]
    print(f"Using '{args.scenario}' scenario")

    # Apply overrides
    if args.seed is not None:
        cfg = replace(cfg, seed=args.seed)
    if args.customers is not None:
        cfg = replace(cfg, customers=replace(cfg.customers, num_customers=args.customers))

    print(f"\nGenerating with seed={cfg.seed}...")
    shop = make_shop(cfg)

    num_orders = sum(len(c.orders) for c in shop.customers)
    print(f"✓ Generated {len(shop.customers)} customers and {num_orders} orders for '{shop.name}'\n")

    # Show preview
    print("Sample Customers:")
    for c in shop.customers[:3]:
        print(f"  {c.name}: city={c.city.name}, orders={len(c.orders)}")

    path = save_shop_json(shop, output_dir=args.output)
    print(f"\n✓ Saved to '{path}'")


if __name__ == "__main__":
    main()
