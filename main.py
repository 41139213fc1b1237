# main.py
import logging

from src.business_objects.common import City
from src.business_objects.config import ShopGenConfig
from src.business_objects.generators import make_shop
from src.dates import MyDate, TimeInterval, check_in_range, task1, task2
from src.properties.effective_date import D
from src.properties.invokable import Invokable, invoke_twice
from src.properties.property_example import LazyProperty, PropertyExample
from src.queries.collection_tasks import largest_group_by_length
from src.queries.product_queries import find_most_expensive_product_by
from src.quality_metrics.shop_kpis import shop_kpis
from scripts.utils import print_report, run_query_catalogue


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # ------------------------------------------------------------
    # Collections over a generated shop
    # ------------------------------------------------------------
    cfg = ShopGenConfig(
        seed=123,
        name="Koan Shop",
        products=dict(num_products=8, price=(2.0, 120.0)),
        customers=dict(num_customers=6, cities=("Berlin", "Tokyo", "Lima")),
        orders=dict(orders_per_customer=(0, 3), products_per_order=(1, 3), delivered_ratio=0.6),
    )
    shop = make_shop(cfg)

    print(f"Generated '{shop.name}' with {len(shop.customers)} customers.\n")
    print_report(run_query_catalogue(shop, City("Berlin")))

    first = shop.customers[0]
    print(f"\nMost expensive delivered product of {first.name}: {find_most_expensive_product_by(first)}")
    print("Largest length group:", largest_group_by_length(["a", "bb", "cc", "ddd", "ee"]))
    print("KPIs:", shop_kpis(shop))

    # ------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------
    today = MyDate(2024, 2, 29)
    print(f"\n{today} + YEAR + WEEK = {task1(today)}")
    print(f"{today} + YEAR*2 + WEEK*3 + DAY*5 = {task2(today)}")
    print(f"{today} + DAY*2 = {today + TimeInterval.DAY * 2}")
    print("In March?", check_in_range(today, MyDate(2024, 3, 1), MyDate(2024, 3, 31)))
    print("Last days of Feb:", [str(d) for d in MyDate(2024, 2, 27).range_to(MyDate(2024, 3, 1))])

    # ------------------------------------------------------------
    # Invoke + properties
    # ------------------------------------------------------------
    print("\nInvocations:", invoke_twice(Invokable()).number_of_invocations)

    example = PropertyExample()
    example.property_with_counter = 1
    example.property_with_counter = 2
    print("Property writes:", example.counter)

    lazy = LazyProperty(lambda: 42)
    print("Lazy value:", lazy.lazy_value)

    holder = D()
    print("Effective date before write:", holder.date)
    holder.date = MyDate(2021, 6, 15)
    print("Effective date after write:", holder.date)


if __name__ == "__main__":
    main()
