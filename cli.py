# cli.py
import asyncio
import sys
from typing import Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm
from rich.table import Table
from rich.text import Text

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from epasal.catalog import find_product
from epasal.config import settings
from epasal.loader import load_catalog
from epasal.log import configure_logging
from epasal.state import (
    AddToCart, Checkout, DecreaseQuantity, IncreaseQuantity, RemoveItem,
    SelectCategory, SetSearchQuery, Store, ToggleCart,
)
from epasal.view import render
from epasal_sdk.client import CatalogClient

console = Console()

status_message = "Ready"
status_ok = True

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})

MENU_OPTIONS = [
    ("1", "🔍 Search products", "5", "➖ Decrease quantity"),
    ("2", "🏷️ Select category", "6", "🗑️ Remove from cart"),
    ("3", "➕ Add to cart", "7", "🛒 Show/hide cart"),
    ("4", "➕ Increase quantity", "8", "✅ Checkout"),
    ("", "", "q", "👋 Quit"),
]


def show_status(message: str, is_success: bool = True) -> Panel:
    style = "green" if is_success else "red"
    return Panel.fit(Text(message, style=style), title="Status")


# ---------------------------
# Input parsing (never lets a bad position reach the cart)
# ---------------------------
def parse_position(raw: str, store: Store) -> Optional[int]:
    """Turn a 1-based cart position typed by the user into a cart index."""
    try:
        position = int(raw.strip())
    except ValueError:
        return None
    if position < 1 or position > len(store.state.cart.lines_by_id):
        return None
    return position - 1


def match_category(raw: str, store: Store) -> Optional[str]:
    wanted = raw.strip().lower()
    for category in store.state.categories:
        if category.lower() == wanted:
            return category
    return None


def run_command(store: Store, choice: str, arg: str = "") -> Tuple[str, bool]:
    """Dispatch one menu choice. Returns the status message and whether it succeeded."""
    if choice == "1":
        store.dispatch(SetSearchQuery(arg))
        return (f"Searching for '{arg}'" if arg else "Search cleared"), True

    elif choice == "2":
        category = match_category(arg, store)
        if category is None:
            return f"Unknown category '{arg}'", False
        store.dispatch(SelectCategory(category))
        return f"Showing {category}", True

    elif choice == "3":
        try:
            product = find_product(store.state.products, int(arg.strip()))
        except (ValueError, KeyError):
            return f"No product with id '{arg}'", False
        store.dispatch(AddToCart(product))
        return f"Added '{product.title}' to cart", True

    elif choice in ("4", "5", "6"):
        index = parse_position(arg, store)
        if index is None:
            return f"No cart line at position '{arg}'", False
        title = store.state.cart.lines[index].title
        if choice == "4":
            store.dispatch(IncreaseQuantity(index))
            return f"Increased '{title}'", True
        if choice == "5":
            store.dispatch(DecreaseQuantity(index))
            return f"Decreased '{title}'", True
        store.dispatch(RemoveItem(index))
        return f"Removed '{title}' from cart", True

    elif choice == "7":
        store.dispatch(ToggleCart())
        return ("Cart opened" if store.state.is_cart_open else "Cart closed"), True

    elif choice == "8":
        store.dispatch(Checkout())
        return "Checkout is not available yet", False

    return f"Unknown option '{choice}'", False


# ---------------------------
# Prompts
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = "") -> str:
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_argument(store: Store, choice: str) -> str:
    state = store.state
    if choice == "1":
        return prompt_with_autocomplete("Search for products", default=state.search_query)
    if choice == "2":
        return prompt_with_autocomplete("Category", completer=WordCompleter(list(state.categories), ignore_case=True))
    if choice == "3":
        ids = [str(p.id) for p in state.products]
        return prompt_with_autocomplete("Product ID", completer=WordCompleter(ids))
    if choice in ("4", "5", "6"):
        positions = [str(i) for i in range(1, len(state.cart.lines_by_id) + 1)]
        return prompt_with_autocomplete("Cart position", completer=WordCompleter(positions))
    return ""


def load(store: Store, client: CatalogClient) -> None:
    global status_message, status_ok
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        transient=True,
        console=console,
    ) as progress:
        progress.add_task(description="Loading products...", total=None)
        loaded = asyncio.run(load_catalog(store, client))
    status_ok = loaded
    status_message = "Products loaded" if loaded else "Error: could not load products"


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, status_ok

    configure_logging(settings.log_level, console=console)
    store = Store()
    client = CatalogClient(products_url=settings.products_url, timeout=settings.timeout)

    console.clear()
    render(console, store.state, settings.currency)
    load(store, client)

    while True:
        console.print()
        console.rule(style="dim")
        render(console, store.state, settings.currency)

        if status_message:
            console.print(show_status(status_message, status_ok))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        for row in MENU_OPTIONS:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 9)] + ["q", "quit", "exit"])
        ).strip()

        if choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Thank you for shopping at EPasal! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)
            continue

        arg = ask_argument(store, choice)
        status_message, status_ok = run_command(store, choice, arg)


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
