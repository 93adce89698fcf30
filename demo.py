#!/usr/bin/env python
import asyncio
import sys

from rich.console import Console

from epasal.config import settings
from epasal.loader import load_catalog
from epasal.log import configure_logging
from epasal.state import (
    AddToCart, DecreaseQuantity, IncreaseQuantity, RemoveItem,
    SelectCategory, SetSearchQuery, Store, ToggleCart, visible_products,
)
from epasal.view import format_price, render
from epasal_sdk.client import CatalogClient


def main() -> int:
    console = Console()
    configure_logging(settings.log_level, console=console)
    store = Store()
    client = CatalogClient(products_url=settings.products_url, timeout=settings.timeout)

    # -----------------------------
    # Load catalog
    # -----------------------------
    console.print(f"Loading products from {settings.products_url}...")
    if not asyncio.run(load_catalog(store, client)):
        render(console, store.state, settings.currency)
        return 1
    console.print(f"Categories: {', '.join(store.state.categories)}")
    if len(store.state.categories) < 2:
        console.print("[yellow]Catalog is empty, nothing to demo[/yellow]")
        return 1

    # -----------------------------
    # Filter by the first real category
    # -----------------------------
    category = store.state.categories[1]
    store.dispatch(SelectCategory(category))
    products = visible_products(store.state)
    console.print(f"\n{len(products)} products in '{category}'")

    # -----------------------------
    # Fill the cart
    # -----------------------------
    store.dispatch(AddToCart(products[0]))
    store.dispatch(AddToCart(products[0]))
    if len(products) > 1:
        store.dispatch(AddToCart(products[1]))
    store.dispatch(IncreaseQuantity(0))
    store.dispatch(DecreaseQuantity(0))

    # -----------------------------
    # Search across all categories
    # -----------------------------
    store.dispatch(SelectCategory("All"))
    store.dispatch(SetSearchQuery(products[0].title.split()[0]))
    store.dispatch(ToggleCart())
    render(console, store.state, settings.currency)

    # -----------------------------
    # Remove the first line
    # -----------------------------
    store.dispatch(RemoveItem(0))
    cart = store.state.cart
    console.print(f"\nAfter removal: {cart.total_item_count()} items, total {format_price(cart.total_price(), settings.currency)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
