"""
storefront/shop/order.py
------------------------
Order form state and the simulated order submission.

There is no payment or order backend: a submission with a non-empty cart
always succeeds. The only failure is an empty cart, reported as a
destructive notification with nothing mutated.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

from storefront.shop.cart import clear_cart
from storefront.notifications import Notification, Severity

if TYPE_CHECKING:
    from storefront.shop.state import ShopState


@dataclass
class OrderForm:
    """Contact and shipping fields entered at checkout."""
    name:    str = ''
    email:   str = ''
    phone:   str = ''
    address: str = ''

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.field_names()}


EMPTY_CART = Notification(
    title='Cart is empty',
    description='Add products to your cart',
    severity=Severity.DESTRUCTIVE,
)

ORDER_PLACED = Notification(
    title='Order placed!',
    description='We will contact you shortly',
)


def update_form_field(form: OrderForm, field: str, value: str) -> None:
    """Set one form field. Unknown field names raise ValueError."""
    if field not in OrderForm.field_names():
        raise ValueError(f'Unknown order form field "{field}".')
    setattr(form, field, value)


def reset_form(form: OrderForm) -> None:
    for name in OrderForm.field_names():
        setattr(form, name, '')


def submit_order(state: ShopState) -> Notification:
    """
    Submit the current order.

    Empty cart → EMPTY_CART, state untouched (form kept, surface stays open).
    Otherwise  → ORDER_PLACED; cart cleared, form reset, checkout closed.
    """
    if not state.cart:
        return EMPTY_CART

    clear_cart(state.cart)
    reset_form(state.order_form)
    state.checkout_open = False
    return ORDER_PLACED
