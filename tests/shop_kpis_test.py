# tests/shop_kpis_test.py
from __future__ import annotations

import csv

import pytest

from src.business_objects import City, Customer, Order, Product, Shop
from src.quality_metrics.shop_kpis import city_rows, export_city_csv, shop_kpis


def build_shop() -> Shop:
    milk, wine = Product("Milk", 1.5), Product("Wine", 12.0)
    return Shop("Koan Shop", (
        Customer("Ann", City("Oslo"), (Order((milk, wine), True), Order((milk,), False))),
        Customer("Bob", City("Lima"), (Order((wine,), True),)),
        Customer("Cid", City("Oslo"), ()),
    ))


def test_kpis():
    k = shop_kpis(build_shop())
    assert k["num_customers"] == 3
    assert k["num_orders"] == 3
    assert k["num_delivered"] == 2
    assert k["num_cities"] == 2
    assert k["revenue"] == pytest.approx(27.0)
    assert k["delivered_rate"] == pytest.approx(2 / 3)
    assert k["avg_order_value"] == pytest.approx(9.0)


def test_kpis_on_empty_shop_are_zero():
    k = shop_kpis(Shop("Empty"))
    assert all(v == 0 for v in k.values())


def test_city_rows():
    assert city_rows(build_shop()) == [
        {"city": "Oslo", "customers": 2, "orders": 2, "revenue": 15.0},
        {"city": "Lima", "customers": 1, "orders": 1, "revenue": 12.0},
    ]


def test_export_city_csv(tmp_path):
    path = export_city_csv(build_shop(), str(tmp_path / "reports" / "cities.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["city"] for r in rows] == ["Oslo", "Lima"]
    assert rows[0]["revenue"] == "15.0"


def test_export_city_csv_writes_utf8(tmp_path):
    shop = Shop("Unicode", (Customer("Ann", City("Zürich"), (Order((Product("Käse", 4.0),), True),)),))
    path = export_city_csv(shop, str(tmp_path / "cities.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["city"] == "Zürich"
