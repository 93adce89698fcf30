# epasal/view.py
from decimal import ROUND_HALF_UP, Decimal
from typing import List

from rich import box
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .cart import CENTS
from .models import Product
from .state import StoreState, cart_badge, visible_products

LOADING_MESSAGE = "Loading products..."
NO_PRODUCTS_MESSAGE = "No products found."
EMPTY_CART_MESSAGE = "Your cart is empty."
CART_HINT = "4/5 change quantity, 6 remove line"


def format_price(amount: Decimal, currency: str = "Rs.") -> str:
    return f"{currency} {amount.quantize(CENTS, rounding=ROUND_HALF_UP)}"


# ---------------------------
# Header, tabs
# ---------------------------
def create_header(state: StoreState) -> Panel:
    header = Table(show_header=False, box=None, expand=True)
    header.add_column("left", width=12)
    header.add_column("center", ratio=1)
    header.add_column("right", justify="right", width=16)

    if state.search_query:
        search = Text.assemble("🔍 ", state.search_query)
    else:
        search = Text.assemble("🔍 ", ("Search for products...", "dim"))
    badge = cart_badge(state)
    cart = "🛒" if badge is None else f"🛒 [bold white on red] {badge} [/bold white on red]"
    header.add_row("[bold blue]EPasal[/bold blue]", search, f"{cart}  👤")
    return Panel(header, box=box.ROUNDED, style="bold")


def category_tabs(state: StoreState) -> Text:
    tabs = Text()
    for category in state.categories:
        style = "bold white on grey23" if category == state.active_category else "black on grey93"
        tabs.append(f" {category.capitalize()} ", style=style)
        tabs.append(" ")
    return tabs


# ---------------------------
# Product grid
# ---------------------------
def product_grid(state: StoreState, currency: str = "Rs.") -> RenderableType:
    if state.loading:
        return Text(LOADING_MESSAGE, style="dim", justify="center")

    products: List[Product] = visible_products(state)
    if not products:
        return Text(NO_PRODUCTS_MESSAGE, style="italic yellow", justify="center")

    table = Table(
        title="📦 Products",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True,
    )
    table.add_column("ID", style="dim", justify="right", width=6)
    table.add_column("Title", style="bold", width=32, no_wrap=True, overflow="ellipsis")
    table.add_column("Price", justify="right", width=14)
    table.add_column("Category", width=16)
    table.add_column("Thumbnail", style="dim", width=28, no_wrap=True, overflow="ellipsis")

    for p in products:
        table.add_row(str(p.id), Text(p.title), format_price(p.price, currency), Text(p.category), Text(p.thumbnail))
    return table


# ---------------------------
# Cart panel
# ---------------------------
def cart_panel(state: StoreState, currency: str = "Rs.") -> Panel:
    lines = state.cart.lines
    total = Text.assemble(("Total: ", "bold"), (format_price(state.cart.total_price(), currency), "bold green"))
    checkout = Text("[ Checkout ]", style="bold green")

    if not lines:
        body: RenderableType = Group(Text(EMPTY_CART_MESSAGE, style="italic"), total, checkout)
        return Panel(body, title="🛒 Cart", border_style="blue")

    table = Table(box=box.ROUNDED, header_style="bold blue", show_lines=True, caption=CART_HINT)
    table.add_column("#", justify="right", width=4)
    table.add_column("Thumbnail", style="dim", width=24, no_wrap=True, overflow="ellipsis")
    table.add_column("Product", style="bold", width=30)
    table.add_column("Price", justify="right", width=12)
    table.add_column("Qty", justify="right", width=6)
    table.add_column("Subtotal", justify="right", width=14)

    for position, line in enumerate(lines, start=1):
        table.add_row(
            str(position),
            Text(line.thumbnail),
            Text(line.title),
            format_price(line.price, currency),
            str(line.quantity),
            format_price(line.line_total, currency),
        )
    return Panel(Group(table, total, checkout), title="🛒 Cart", border_style="blue")


def render(console: Console, state: StoreState, currency: str = "Rs.") -> None:
    console.print(create_header(state))
    console.print(category_tabs(state))
    console.print(product_grid(state, currency))
    if state.is_cart_open:
        console.print(cart_panel(state, currency))
