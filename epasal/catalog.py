# epasal/catalog.py
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from .models import Product

ALL_CATEGORIES = "All"


def make_products(raw: Iterable[Dict[str, Any]]) -> List[Product]:
    """Validate raw API records into products. Raises pydantic.ValidationError."""
    return [Product.model_validate(item) for item in raw]


def categories_of(products: Iterable[Product]) -> Tuple[str, ...]:
    seen: Dict[str, None] = {}
    for p in products:
        seen.setdefault(p.category, None)
    return (ALL_CATEGORIES, *seen)


def filter_products(products: Sequence[Product], active_category: str, search_query: str) -> List[Product]:
    term = search_query.lower()
    out = []
    for p in products:
        if active_category != ALL_CATEGORIES and p.category != active_category:
            continue
        if term not in p.title.lower():
            continue
        out.append(p)
    return out


def find_product(products: Sequence[Product], product_id: int) -> Product:
    for p in products:
        if p.id == product_id:
            return p
    raise KeyError(product_id)
