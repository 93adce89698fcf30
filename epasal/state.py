"""
Single storefront state object and the reducer that moves it forward.

Every user intent is an action object. ``reduce`` maps an action to a pure
transition and returns a new ``StoreState``; ``Store`` keeps the current state
and swaps it wholesale on every ``dispatch`` so there is never a partially
updated state to observe.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Sequence, Tuple

from .cart import Cart
from .catalog import ALL_CATEGORIES, categories_of, filter_products
from .models import Product


@dataclass(frozen=True)
class StoreState:
    products: Tuple[Product, ...] = ()
    categories: Tuple[str, ...] = (ALL_CATEGORIES,)
    cart: Cart = field(default_factory=Cart)
    active_category: str = ALL_CATEGORIES
    search_query: str = ""
    is_cart_open: bool = False
    loading: bool = True


# ---------------------------
# Actions
# ---------------------------
@dataclass(frozen=True)
class CatalogLoaded:
    products: Sequence[Product]


@dataclass(frozen=True)
class LoadingFinished:
    pass


@dataclass(frozen=True)
class SelectCategory:
    category: str


@dataclass(frozen=True)
class SetSearchQuery:
    query: str


@dataclass(frozen=True)
class AddToCart:
    product: Product


@dataclass(frozen=True)
class IncreaseQuantity:
    index: int


@dataclass(frozen=True)
class DecreaseQuantity:
    index: int


@dataclass(frozen=True)
class RemoveItem:
    index: int


@dataclass(frozen=True)
class ToggleCart:
    pass


@dataclass(frozen=True)
class Checkout:
    pass


def reduce(state: StoreState, action) -> StoreState:
    if isinstance(action, CatalogLoaded):
        products = tuple(action.products)
        return replace(state, products=products, categories=categories_of(products))
    elif isinstance(action, LoadingFinished):
        return replace(state, loading=False)
    elif isinstance(action, SelectCategory):
        return replace(state, active_category=action.category)
    elif isinstance(action, SetSearchQuery):
        return replace(state, search_query=action.query)
    elif isinstance(action, AddToCart):
        return replace(state, cart=state.cart.add_to_cart(action.product))
    elif isinstance(action, IncreaseQuantity):
        return replace(state, cart=state.cart.increase_quantity(action.index))
    elif isinstance(action, DecreaseQuantity):
        return replace(state, cart=state.cart.decrease_quantity(action.index))
    elif isinstance(action, RemoveItem):
        return replace(state, cart=state.cart.remove_item(action.index))
    elif isinstance(action, ToggleCart):
        return replace(state, is_cart_open=not state.is_cart_open)
    elif isinstance(action, Checkout):
        # checkout is not wired to any order submission
        return state
    raise TypeError(f"unknown action: {action!r}")


# ---------------------------
# Selectors
# ---------------------------
def visible_products(state: StoreState) -> List[Product]:
    return filter_products(state.products, state.active_category, state.search_query)


def cart_badge(state: StoreState) -> Optional[int]:
    if not state.cart.lines_by_id:
        return None
    return state.cart.total_item_count()


Listener = Callable[[StoreState], None]


class Store:
    def __init__(self, state: Optional[StoreState] = None):
        self.state = state if state is not None else StoreState()
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def dispatch(self, action) -> StoreState:
        self.state = reduce(self.state, action)
        for listener in list(self._listeners):
            listener(self.state)
        return self.state
