from __future__ import annotations

import argparse
import logging
from pathlib import Path

from src.business_objects.common import City
from src.business_objects.generators import load_shop_json
from src.quality_metrics.shop_kpis import export_city_csv, shop_kpis
from scripts.utils import print_report, run_query_catalogue

# ============================================================================
# CONFIGURATION
# ============================================================================

INPUT_DIR = "shops/shop_1"
OUTPUT_DIR = Path("reports")
DEFAULT_CITY = "Berlin"


# ============================================================================
# MAIN
# ============================================================================

def main():
    parser = argparse.ArgumentParser(description="Run the shop query catalogue over a saved shop")
    parser.add_argument("--input", default=INPUT_DIR, help="shop.json or a directory holding one")
    parser.add_argument("--city", default=DEFAULT_CITY, help="City used by the filter queries")
    parser.add_argument("--csv", action="store_true", help=f"Write per-city CSV under {OUTPUT_DIR}/")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    shop = load_shop_json(args.input)

    print(f"\n{'=' * 60}")
    print(f"Queries for '{shop.name}' (city={args.city})")
    print(f"{'=' * 60}")
    print_report(run_query_catalogue(shop, City(args.city)))

    print(f"\n{'=' * 60}")
    print("Shop KPIs:", shop_kpis(shop))
    print(f"{'=' * 60}\n")

    if args.csv:
        path = export_city_csv(shop, str(OUTPUT_DIR / "cities.csv"))
        print(f"✓ City report saved to: {path}")


if __name__ == "__main__":
    main()
