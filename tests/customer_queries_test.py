# tests/customer_queries_test.py
from __future__ import annotations

import pytest

from src.business_objects import City, Customer, Order, Product, Shop
from src.queries.customer_queries import (
    check_all_customers_are_from,
    count_customers_from,
    customer_name_to_city_map,
    customer_to_city_map,
    find_customer_from,
    get_customer_cities,
    get_customer_with_max_orders,
    get_customers_from,
    get_customers_sorted_by_orders,
    get_customers_with_more_undelivered_orders,
    get_set_of_customers,
    group_customers_by_city,
    has_customer_from,
    name_to_customer_map,
    partition_customers_by_undelivered,
)


# ───────────────────────── helpers to build a tiny shop ───────────────────────── #

X = City("X")
Y = City("Y")
Z = City("Z")

MILK = Product("Milk", 1.5)
BREAD = Product("Bread", 2.0)


def build_two_customer_shop() -> Shop:
    a = Customer("A", X, (Order((MILK,), True), Order((BREAD,), False)))
    b = Customer("B", Y, ())
    return Shop("Two", (a, b))


def build_shop() -> Shop:
    return Shop(
        name="Koan Shop",
        customers=(
            Customer("Ann", City("Berlin"), (Order((MILK,), True),)),
            Customer("Bob", City("Tokyo"), (
                Order((MILK,), False), Order((BREAD,), False), Order((BREAD,), True),
            )),
            Customer("Cid", City("Berlin"), (Order((BREAD,), False), Order((MILK,), True))),
            Customer("Dee", City("Lima"), ()),
            Customer("Eve", City("Tokyo"), (Order((MILK,), True), Order((MILK,), False), Order((BREAD,), True))),
        ),
    )


# ───────────────────────── scenarios ───────────────────────── #

def test_concrete_two_customer_scenario():
    shop = build_two_customer_shop()
    a, b = shop.customers

    assert get_customers_sorted_by_orders(shop) == [a, b]
    assert get_customer_cities(shop) == {X, Y}
    assert has_customer_from(shop, Y) is True
    assert find_customer_from(shop, Z) is None


def test_set_of_customers_collapses_equal_customers():
    c = Customer("Same", X, ())
    shop = Shop("Dupes", (c, Customer("Same", X, ())))
    assert get_set_of_customers(shop) == {c}


def test_sort_is_descending_and_stable_for_ties():
    shop = build_shop()
    names = [c.name for c in get_customers_sorted_by_orders(shop)]
    # Bob and Eve tie with 3 orders; Cid has 2, Ann 1, Dee 0
    assert names == ["Bob", "Eve", "Cid", "Ann", "Dee"]


def test_filter_queries_use_exact_city_name():
    shop = build_shop()
    berlin = City("Berlin")

    assert [c.name for c in get_customers_from(shop, berlin)] == ["Ann", "Cid"]
    assert get_customers_from(shop, City("berlin")) == []
    assert find_customer_from(shop, berlin).name == "Ann"


@pytest.mark.parametrize("city", [City("Berlin"), City("Tokyo"), City("Lima"), City("Nowhere")])
def test_count_matches_filter_length(city):
    shop = build_shop()
    assert count_customers_from(shop, city) == len(get_customers_from(shop, city))


def test_all_and_any_predicates():
    shop = build_shop()
    assert check_all_customers_are_from(shop, City("Berlin")) is False
    assert has_customer_from(shop, City("Lima")) is True
    assert has_customer_from(shop, City("Oslo")) is False

    only_berlin = Shop("B", tuple(get_customers_from(shop, City("Berlin"))))
    assert check_all_customers_are_from(only_berlin, City("Berlin")) is True


def test_predicates_on_empty_shop():
    empty = Shop("Empty")
    assert check_all_customers_are_from(empty, X) is True
    assert has_customer_from(empty, X) is False
    assert count_customers_from(empty, X) == 0
    assert find_customer_from(empty, X) is None


def test_customer_with_max_orders():
    assert get_customer_with_max_orders(Shop("Empty")) is None

    single = Customer("Solo", X, ())
    assert get_customer_with_max_orders(Shop("One", (single,))) is single

    # Bob and Eve tie: first one wins
    assert get_customer_with_max_orders(build_shop()).name == "Bob"


def test_associate_maps():
    shop = build_shop()
    by_name = name_to_customer_map(shop)
    assert list(by_name) == ["Ann", "Bob", "Cid", "Dee", "Eve"]
    assert by_name["Cid"] is shop.customers[2]

    to_city = customer_to_city_map(shop)
    assert to_city[shop.customers[1]] == City("Tokyo")

    assert customer_name_to_city_map(shop) == {
        "Ann": City("Berlin"), "Bob": City("Tokyo"), "Cid": City("Berlin"),
        "Dee": City("Lima"), "Eve": City("Tokyo"),
    }


def test_duplicate_names_last_write_wins_unless_strict():
    first = Customer("Twin", X, ())
    second = Customer("Twin", Y, (Order((MILK,), True),))
    shop = Shop("Twins", (first, second))

    assert name_to_customer_map(shop) == {"Twin": second}
    assert customer_name_to_city_map(shop) == {"Twin": Y}

    with pytest.raises(ValueError, match="Twin"):
        name_to_customer_map(shop, strict=True)
    with pytest.raises(ValueError):
        customer_name_to_city_map(shop, strict=True)
    # distinct customers never collide as keys
    assert len(customer_to_city_map(shop, strict=True)) == 2


def test_group_by_city():
    shop = build_shop()
    groups = group_customers_by_city(shop)

    assert set(groups) == get_customer_cities(shop)
    assert list(groups) == [City("Berlin"), City("Tokyo"), City("Lima")]
    assert [c.name for c in groups[City("Tokyo")]] == ["Bob", "Eve"]
    assert group_customers_by_city(Shop("Empty")) == {}


def test_partition_by_undelivered():
    shop = build_shop()
    more, rest = partition_customers_by_undelivered(shop)

    # Bob: 2 undelivered vs 1; Cid: 1 vs 1 (tie goes to rest)
    assert [c.name for c in more] == ["Bob"]
    assert [c.name for c in rest] == ["Ann", "Cid", "Dee", "Eve"]
    assert len(more) + len(rest) == len(shop.customers)
    assert not set(more) & set(rest)

    assert get_customers_with_more_undelivered_orders(shop) == {shop.customers[1]}
