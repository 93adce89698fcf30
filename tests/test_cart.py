# tests/test_cart.py
from decimal import Decimal

import pytest
from pydantic import ValidationError

from epasal.cart import Cart
from epasal.models import CartLine, Product


def test_add_same_product_twice_keeps_one_line(products):
    cart = Cart().add_to_cart(products[0]).add_to_cart(products[0])
    assert len(cart.lines) == 1
    assert cart.lines[0].id == products[0].id
    assert cart.lines[0].quantity == 2


def test_add_appends_new_products_in_order(products):
    cart = Cart()
    for p in (products[2], products[0], products[1]):
        cart = cart.add_to_cart(p)
    assert [line.id for line in cart.lines] == [3, 1, 2]
    assert all(line.quantity == 1 for line in cart.lines)


def test_operations_leave_original_cart_untouched(products):
    empty = Cart()
    one = empty.add_to_cart(products[0])
    two = one.add_to_cart(products[0])
    assert empty.lines == []
    assert one.lines[0].quantity == 1
    assert two.lines[0].quantity == 2


def test_increase_quantity(products):
    cart = Cart().add_to_cart(products[0]).add_to_cart(products[1])
    cart = cart.increase_quantity(1)
    assert [line.quantity for line in cart.lines] == [1, 2]


def test_decrease_never_goes_below_one(products):
    cart = Cart().add_to_cart(products[0])
    same = cart.decrease_quantity(0)
    # no-op at quantity 1, line survives
    assert same is cart
    assert same.lines[0].quantity == 1

    cart = cart.increase_quantity(0).increase_quantity(0).decrease_quantity(0)
    assert cart.lines[0].quantity == 2


def test_remove_compacts_positions(products):
    cart = Cart()
    for p in products:
        cart = cart.add_to_cart(p)

    after = cart.remove_item(1)
    assert [line.id for line in after.lines] == [1, 3]

    # positions before the removed one address the same line
    assert after.increase_quantity(0).lines[0].quantity == cart.increase_quantity(0).lines[0].quantity
    # the removed position now addresses the former next line
    assert after.increase_quantity(1).lines_by_id[3].quantity == 2


def test_re_adding_removed_product_appends_at_end(products):
    cart = Cart().add_to_cart(products[0]).add_to_cart(products[1]).remove_item(0)
    cart = cart.add_to_cart(products[0])
    assert [line.id for line in cart.lines] == [2, 1]
    assert cart.lines[1].quantity == 1


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_out_of_range_position_is_rejected(products, index):
    cart = Cart().add_to_cart(products[0]).add_to_cart(products[1])
    for op in (cart.increase_quantity, cart.decrease_quantity, cart.remove_item):
        with pytest.raises(IndexError):
            op(index)
    assert [line.quantity for line in cart.lines] == [1, 1]


def test_totals(products):
    cart = Cart().add_to_cart(products[0]).add_to_cart(products[0]).add_to_cart(products[1])
    # 10.00 x 2 + 5.50 x 1
    assert cart.total_price() == Decimal("25.50")
    assert str(cart.total_price()) == "25.50"
    assert cart.total_item_count() == 3


def test_totals_on_empty_cart():
    assert str(Cart().total_price()) == "0.00"
    assert Cart().total_item_count() == 0


def test_total_rounds_to_cents():
    p = Product(id=9, title="Gum", category="snacks", price="0.333", thumbnail="x")
    cart = Cart().add_to_cart(p).add_to_cart(p).add_to_cart(p)
    assert str(cart.total_price()) == "1.00"


def test_cart_rejects_mismatched_keys(products):
    line = CartLine.from_product(products[0])
    with pytest.raises(ValidationError):
        Cart(lines_by_id={99: line})


def test_cart_line_quantity_must_be_positive(products):
    with pytest.raises(ValidationError):
        CartLine.from_product(products[0], quantity=0)
