# tests/test_catalog.py
from decimal import Decimal

import pytest
from pydantic import ValidationError

from epasal.catalog import categories_of, filter_products, find_product, make_products
from epasal.models import Product


def test_make_products_ignores_extra_fields(raw_products):
    products = make_products(raw_products)
    assert [p.id for p in products] == [1, 2, 3]
    assert not hasattr(products[0], "rating")


def test_float_prices_keep_their_decimal_text(products):
    assert products[2].price == Decimal("19.99")


def test_negative_price_is_rejected():
    with pytest.raises(ValidationError):
        Product(id=1, title="x", category="y", price=-1, thumbnail="z")


def test_missing_field_is_rejected():
    with pytest.raises(ValidationError):
        make_products([{"id": 1, "title": "No price", "category": "x", "thumbnail": "t"}])


def test_products_are_immutable(products):
    with pytest.raises(ValidationError):
        products[0].title = "changed"


def test_categories_first_seen_order(products):
    assert categories_of(products) == ("All", "shoes", "hats")


def test_categories_of_nothing():
    assert categories_of([]) == ("All",)


def test_identity_filter(products):
    assert filter_products(products, "All", "") == products


def test_filter_category_and_case_insensitive_title(products):
    out = filter_products(products, "shoes", "red")
    assert [p.id for p in out] == [1, 3]

    out = filter_products(products, "shoes", "RED S")
    assert [p.id for p in out] == [1, 3]

    out = filter_products(products[:2], "shoes", "red")
    assert [p.title for p in out] == ["Red Shoe"]


def test_filter_category_is_exact(products):
    assert filter_products(products, "Shoes", "") == []
    assert filter_products(products, "hats", "") == [products[1]]


def test_filter_all_with_query(products):
    assert [p.id for p in filter_products(products, "All", "hat")] == [2]
    assert filter_products(products, "All", "nothing like this") == []


def test_filter_does_not_touch_source(products):
    before = list(products)
    filter_products(products, "hats", "blue")
    assert products == before


def test_find_product(products):
    assert find_product(products, 2).title == "Blue Hat"
    with pytest.raises(KeyError):
        find_product(products, 42)
