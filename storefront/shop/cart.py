"""
storefront/shop/cart.py
-----------------------
Cart transitions and derived totals.

A cart is a plain list of CartItem, ordered by first add. Invariants:
  - at most one CartItem per product id
  - every CartItem has quantity >= 1 (an item that would drop to 0 is removed)

All transitions mutate the list in place; none of them touch the Flask
session. Loading and saving is the job of storefront.state.

Totals are folds over the list and are recomputed on every call.
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from storefront.shop.catalog import Product
from storefront.notifications import Notification


@dataclass
class CartItem:
    """A Product plus a purchase quantity."""
    product:  Product
    quantity: int

    @property
    def id(self) -> int:
        return self.product.id

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def price(self) -> int:
        return self.product.price

    @property
    def image(self) -> str:
        return self.product.image

    @property
    def description(self) -> str:
        return self.product.description

    @property
    def line_total(self) -> int:
        return self.price * self.quantity


Cart = List[CartItem]


def find_item(cart: Cart, product_id: int) -> Optional[CartItem]:
    for item in cart:
        if item.id == product_id:
            return item
    return None


# ── Write ─────────────────────────────────────────────────────────

def add_to_cart(cart: Cart, product: Product) -> Notification:
    """
    Add one unit of `product` to the cart.
    If already present, increments quantity by 1; otherwise appends it.

    Returns the "added" notification for the caller to publish.
    """
    item = find_item(cart, product.id)
    if item is not None:
        item.quantity += 1
    else:
        cart.append(CartItem(product=product, quantity=1))

    return Notification(title='Added to cart', description=product.name)


def remove_from_cart(cart: Cart, product_id: int) -> None:
    """Remove a product entirely from the cart. Absent ids are ignored."""
    cart[:] = [item for item in cart if item.id != product_id]


def update_quantity(cart: Cart, product_id: int, quantity: int) -> None:
    """
    Set the quantity of a cart line.
    quantity <= 0 removes the line; an absent id is a no-op.
    """
    if quantity <= 0:
        remove_from_cart(cart, product_id)
        return

    item = find_item(cart, product_id)
    if item is not None:
        item.quantity = quantity


def clear_cart(cart: Cart) -> None:
    """Empty the cart after a submitted order."""
    cart.clear()


# ── Totals ────────────────────────────────────────────────────────

def cart_total(cart: Cart) -> int:
    """Sum of price × quantity over all lines."""
    return sum(item.price * item.quantity for item in cart)


def cart_count(cart: Cart) -> int:
    """Sum of quantities over all lines (the header badge number)."""
    return sum(item.quantity for item in cart)


def order_lines(cart: Cart) -> Iterator[Tuple[str, int, int]]:
    """Yield (name, quantity, line_total) for the checkout summary."""
    for item in cart:
        yield item.name, item.quantity, item.line_total
