"""
test_cart.py — Tests for cart transitions, totals and order submission.
Run: pytest test_cart.py -v

These exercise storefront.shop directly: no app, no session.
"""
import dataclasses

import pytest

from storefront.notifications import Severity
from storefront.shop.cart import (
    CartItem, add_to_cart, remove_from_cart, update_quantity,
    cart_total, cart_count, order_lines, find_item,
)
from storefront.shop.catalog import PRODUCTS, Product, all_products, get_product
from storefront.shop.order import EMPTY_CART, ORDER_PLACED, OrderForm, submit_order, update_form_field
from storefront.shop.state import ShopState


HEADPHONES = get_product(1)   # 12 990
WATCH      = get_product(2)   # 24 990
BACKPACK   = get_product(3)   #  8 990


def cart_of(*lines):
    """cart_of((product, qty), ...) → list of CartItem in that order."""
    return [CartItem(product=p, quantity=q) for p, q in lines]


# ── Catalog ───────────────────────────────────────────────────────

def test_catalog_ids_are_unique():
    ids = [p.id for p in all_products()]
    assert len(ids) == len(set(ids)) == 6


def test_get_product_unknown_id_is_none():
    assert get_product(999) is None


def test_products_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        PRODUCTS[0].price = 1


# ── add_to_cart ───────────────────────────────────────────────────

def test_add_new_product_appends_with_quantity_one():
    cart = []
    add_to_cart(cart, HEADPHONES)
    assert len(cart) == 1
    assert cart[0].id == 1
    assert cart[0].quantity == 1
    assert cart[0].name == HEADPHONES.name


@pytest.mark.parametrize('times', [1, 2, 5, 17])
def test_repeated_adds_keep_one_line_per_product(times):
    cart = []
    for _ in range(times):
        add_to_cart(cart, WATCH)
    assert [item.id for item in cart] == [2]
    assert cart[0].quantity == times


def test_add_preserves_first_add_order():
    cart = []
    add_to_cart(cart, BACKPACK)
    add_to_cart(cart, HEADPHONES)
    add_to_cart(cart, BACKPACK)
    assert [item.id for item in cart] == [3, 1]


def test_add_returns_normal_notification_with_product_name():
    note = add_to_cart([], HEADPHONES)
    assert note.title == 'Added to cart'
    assert note.description == HEADPHONES.name
    assert note.severity is Severity.NORMAL
    assert not note.is_destructive


def test_scenario_add_same_product_twice():
    cart = []
    add_to_cart(cart, HEADPHONES)
    add_to_cart(cart, HEADPHONES)
    assert [(item.id, item.quantity) for item in cart] == [(1, 2)]
    assert cart_total(cart) == 25980
    assert cart_count(cart) == 2


# ── remove_from_cart ──────────────────────────────────────────────

def test_remove_drops_the_line():
    cart = cart_of((HEADPHONES, 2), (WATCH, 1))
    remove_from_cart(cart, 1)
    assert [item.id for item in cart] == [2]


def test_remove_absent_id_is_noop():
    cart = cart_of((HEADPHONES, 2))
    remove_from_cart(cart, 42)
    assert [(item.id, item.quantity) for item in cart] == [(1, 2)]


def test_remove_mutates_the_same_list():
    cart = cart_of((HEADPHONES, 1))
    same = cart
    remove_from_cart(cart, 1)
    assert same is cart and same == []


# ── update_quantity ───────────────────────────────────────────────

def test_update_sets_quantity():
    cart = cart_of((HEADPHONES, 2))
    update_quantity(cart, 1, 7)
    assert cart[0].quantity == 7


@pytest.mark.parametrize('quantity', [0, -1, -50])
def test_update_to_zero_or_negative_removes(quantity):
    cart = cart_of((HEADPHONES, 2), (WATCH, 1))
    update_quantity(cart, 1, quantity)
    assert [item.id for item in cart] == [2]


def test_update_absent_id_leaves_cart_unchanged():
    cart = cart_of((HEADPHONES, 2))
    update_quantity(cart, 99, 3)
    assert [(item.id, item.quantity) for item in cart] == [(1, 2)]


def test_update_has_no_upper_bound():
    cart = cart_of((WATCH, 1))
    update_quantity(cart, 2, 10_000)
    assert cart_count(cart) == 10_000
    assert cart_total(cart) == 24990 * 10_000


def test_scenario_update_to_zero():
    cart = cart_of((HEADPHONES, 2), (WATCH, 1))
    update_quantity(cart, 1, 0)
    assert [(item.id, item.quantity) for item in cart] == [(2, 1)]
    assert cart_total(cart) == 24990


# ── Totals ────────────────────────────────────────────────────────

def test_totals_of_empty_cart_are_zero():
    assert cart_total([]) == 0
    assert cart_count([]) == 0


def test_totals_are_recomputed_after_every_change():
    cart = []
    add_to_cart(cart, HEADPHONES)
    add_to_cart(cart, BACKPACK)
    assert cart_total(cart) == 12990 + 8990
    update_quantity(cart, 3, 3)
    assert cart_total(cart) == 12990 + 3 * 8990
    assert cart_count(cart) == 4
    remove_from_cart(cart, 1)
    assert cart_total(cart) == 3 * 8990
    assert cart_count(cart) == 3


def test_totals_match_line_sums():
    cart = cart_of((HEADPHONES, 3), (WATCH, 2), (BACKPACK, 1))
    assert cart_total(cart) == sum(i.price * i.quantity for i in cart)
    assert cart_count(cart) == sum(i.quantity for i in cart)


def test_order_lines():
    cart = cart_of((HEADPHONES, 2), (BACKPACK, 1))
    assert list(order_lines(cart)) == [
        (HEADPHONES.name, 2, 25980),
        (BACKPACK.name, 1, 8990),
    ]


def test_cart_item_exposes_product_fields():
    item = CartItem(product=Product(9, 'Test', 100, 'img://x', 'desc'), quantity=3)
    assert (item.id, item.name, item.price, item.image, item.description) == (9, 'Test', 100, 'img://x', 'desc')
    assert item.line_total == 300
    assert find_item([item], 9) is item
    assert find_item([item], 10) is None


# ── Order form ────────────────────────────────────────────────────

def test_update_form_field():
    form = OrderForm()
    update_form_field(form, 'email', 'ivan@example.com')
    assert form.email == 'ivan@example.com'
    assert form.to_dict() == {'name': '', 'email': 'ivan@example.com', 'phone': '', 'address': ''}


def test_update_unknown_form_field_raises():
    with pytest.raises(ValueError):
        update_form_field(OrderForm(), 'card_number', '4111')


# ── submit_order ──────────────────────────────────────────────────

def filled_form():
    return OrderForm(name='Ivan', email='ivan@example.com', phone='+7 999', address='Moscow')


def test_submit_empty_cart_changes_nothing():
    state = ShopState(order_form=filled_form(), checkout_open=True)
    note = submit_order(state)

    assert note is EMPTY_CART
    assert note.severity is Severity.DESTRUCTIVE
    assert state.cart == []
    assert state.order_form == filled_form()
    assert state.checkout_open is True


def test_submit_non_empty_cart_resets_everything():
    state = ShopState(
        cart=cart_of((HEADPHONES, 1)),
        order_form=filled_form(),
        checkout_open=True,
    )
    note = submit_order(state)

    assert note is ORDER_PLACED
    assert note.severity is Severity.NORMAL
    assert state.cart == []
    assert state.order_form == OrderForm()
    assert state.order_form.to_dict() == {'name': '', 'email': '', 'phone': '', 'address': ''}
    assert state.checkout_open is False


def test_catalog_keeps_original_ids_and_prices():
    assert [(p.id, p.price) for p in all_products()] == [
        (1, 12990), (2, 24990), (3, 8990), (4, 6990), (5, 15990), (6, 4990),
    ]
