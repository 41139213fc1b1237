# tests/product_queries_test.py
from __future__ import annotations

from src.business_objects import City, Customer, Order, Product, Shop
from src.queries.product_queries import (
    find_most_expensive_product_by,
    get_customer_ordered_products,
    get_most_expensive_product_by,
    get_number_of_times_product_was_ordered,
    get_ordered_products,
    get_products_ordered_by_all,
    money_spent_by,
)


# ───────────────────────── helpers to build a tiny catalog ───────────────────────── #

def build_catalog() -> dict:
    return {
        "milk": Product("Milk", 1.5),
        "bread": Product("Bread", 2.0),
        "cheese": Product("Cheese", 7.25),
        "wine": Product("Wine", 12.0),
        "tea": Product("Tea", 7.25),
    }


def build_shop(p: dict) -> Shop:
    ann = Customer("Ann", City("Berlin"), (
        Order((p["milk"], p["wine"]), False),
        Order((p["bread"], p["milk"]), True),
    ))
    bob = Customer("Bob", City("Tokyo"), (
        Order((p["milk"], p["milk"], p["cheese"]), True),
        Order((p["bread"],), False),
    ))
    return Shop("Koan Shop", (ann, bob))


# ───────────────────────── scenarios ───────────────────────── #

def test_customer_ordered_products_sorted_by_price():
    p = build_catalog()
    ann = build_shop(p).customers[0]
    assert get_customer_ordered_products(ann) == [p["milk"], p["milk"], p["bread"], p["wine"]]


def test_sort_by_price_is_stable():
    p = build_catalog()
    c = Customer("Cid", City("Lima"), (Order((p["tea"], p["cheese"]), True),))
    assert get_customer_ordered_products(c) == [p["tea"], p["cheese"]]


def test_ordered_products_is_distinct():
    p = build_catalog()
    shop = build_shop(p)
    assert get_ordered_products(shop) == {p["milk"], p["wine"], p["bread"], p["cheese"]}
    assert get_ordered_products(Shop("Empty")) == set()


def test_products_ordered_by_all():
    p = build_catalog()
    assert get_products_ordered_by_all(build_shop(p)) == {p["milk"], p["bread"]}


def test_products_ordered_by_all_without_customers_is_full_union():
    shop = Shop("Empty")
    assert get_products_ordered_by_all(shop) == get_ordered_products(shop) == set()


def test_products_ordered_by_all_disjoint_is_empty():
    p = build_catalog()
    shop = Shop("Disjoint", (
        Customer("Ann", City("X"), (Order((p["milk"],), True),)),
        Customer("Bob", City("Y"), (Order((p["wine"],), True),)),
    ))
    assert get_products_ordered_by_all(shop) == set()


def test_products_ordered_by_all_with_a_customer_without_orders_is_empty():
    p = build_catalog()
    shop = Shop("Idle", (
        Customer("Ann", City("X"), (Order((p["milk"],), True),)),
        Customer("Dee", City("Y"), ()),
    ))
    assert get_products_ordered_by_all(shop) == set()


def test_most_expensive_product():
    p = build_catalog()
    ann, bob = build_shop(p).customers
    assert get_most_expensive_product_by(ann) == p["wine"]
    assert get_most_expensive_product_by(Customer("Dee", City("Y"), ())) is None

    tie = Customer("Tie", City("X"), (Order((p["cheese"], p["tea"]), True),))
    assert get_most_expensive_product_by(tie) is p["cheese"]


def test_most_expensive_delivered_product():
    p = build_catalog()
    ann, bob = build_shop(p).customers
    # Ann's wine order was not delivered
    assert find_most_expensive_product_by(ann) == p["bread"]
    assert find_most_expensive_product_by(bob) == p["cheese"]

    undelivered = Customer("Late", City("X"), (Order((p["wine"],), False),))
    assert find_most_expensive_product_by(undelivered) is None


def test_money_spent():
    p = build_catalog()
    ann, bob = build_shop(p).customers
    assert money_spent_by(ann) == 1.5 + 12.0 + 2.0 + 1.5
    assert money_spent_by(bob) == 1.5 + 1.5 + 7.25 + 2.0
    assert money_spent_by(Customer("Dee", City("Y"), ())) == 0.0


def test_number_of_times_product_was_ordered():
    p = build_catalog()
    shop = build_shop(p)
    assert get_number_of_times_product_was_ordered(shop, p["milk"]) == 4
    assert get_number_of_times_product_was_ordered(shop, p["tea"]) == 0
    # match is by name, not by price
    assert get_number_of_times_product_was_ordered(shop, Product("Bread", 99.0)) == 2
