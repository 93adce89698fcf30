"""Shared fixtures: a small catalog in the product API's raw JSON shape."""

import pytest

from epasal.catalog import make_products


RAW_PRODUCTS = [
    {"id": 1, "title": "Red Shoe", "category": "shoes", "price": 10.0, "thumbnail": "https://img.test/1.png",
     "rating": 4.5, "stock": 3},
    {"id": 2, "title": "Blue Hat", "category": "hats", "price": 5.5, "thumbnail": "https://img.test/2.png"},
    {"id": 3, "title": "red Sandal", "category": "shoes", "price": 19.99, "thumbnail": "https://img.test/3.png"},
]


@pytest.fixture
def raw_products():
    return [dict(p) for p in RAW_PRODUCTS]


@pytest.fixture
def products(raw_products):
    return make_products(raw_products)
