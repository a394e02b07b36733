"""
storefront/shop/state.py
------------------------
ShopState: the single owner of a visitor's mutable UI state.

A request loads the state from the Flask session, runs one transition on it
and saves it back. The cookie is last-writer-wins: two overlapping requests
from one visitor would drop one transition. Every state-changing hx-post in
the templates carries hx-sync="body:queue all", so the browser sends them
one at a time.

Session layout under key 'shop':
{
    "cart":          [{"id": int, "quantity": int}, ...],   ← insertion order
    "form":          {"name": str, "email": str, "phone": str, "address": str},
    "cart_open":     bool,
    "checkout_open": bool
}

The cart is stored as a list, not a dict keyed by id: Flask's session
serializer sorts dict keys, which would lose the first-add order.
Only ids and quantities are stored; product fields are rebuilt from the
catalog on load.
"""
from dataclasses import dataclass, field

from flask import current_app, session

from storefront.shop.cart import Cart, CartItem
from storefront.shop.catalog import get_product
from storefront.shop.order import OrderForm


STATE_KEY = 'shop'


@dataclass
class ShopState:
    cart:          Cart = field(default_factory=list)
    order_form:    OrderForm = field(default_factory=OrderForm)
    cart_open:     bool = False
    checkout_open: bool = False

    # ── (De)serialisation ─────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            'cart': [{'id': item.id, 'quantity': item.quantity} for item in self.cart],
            'form': self.order_form.to_dict(),
            'cart_open': self.cart_open,
            'checkout_open': self.checkout_open,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ShopState':
        """
        Rebuild state from a session payload.
        Lines for unknown products or with a non-positive quantity are dropped.
        """
        state = cls()

        for line in data.get('cart', []):
            if not isinstance(line, dict):
                continue
            product = get_product(line.get('id'))
            quantity = line.get('quantity')
            if product is None:
                current_app.logger.warning(f"Dropping unknown product {line.get('id')!r} from session cart")
                continue
            if not isinstance(quantity, int) or quantity <= 0:
                current_app.logger.warning(f"Dropping cart line {product.id} with bad quantity {quantity!r}")
                continue
            if any(item.id == product.id for item in state.cart):
                continue
            state.cart.append(CartItem(product=product, quantity=quantity))

        form = data.get('form')
        if not isinstance(form, dict):
            form = {}
        for name in OrderForm.field_names():
            value = form.get(name, '')
            setattr(state.order_form, name, value if isinstance(value, str) else '')

        state.cart_open = bool(data.get('cart_open', False))
        state.checkout_open = bool(data.get('checkout_open', False))
        return state


# ── Session I/O ───────────────────────────────────────────────────

def load_state() -> ShopState:
    """Return the visitor's state (a fresh, empty one on first visit)."""
    data = session.get(STATE_KEY)
    if not isinstance(data, dict):
        return ShopState()
    return ShopState.from_dict(data)


def save_state(state: ShopState) -> None:
    session[STATE_KEY] = state.to_dict()
    session.permanent = True    # respect PERMANENT_SESSION_LIFETIME
    session.modified = True


# ── Surface toggles ───────────────────────────────────────────────

def open_cart(state: ShopState) -> None:
    state.cart_open = True


def close_cart(state: ShopState) -> None:
    state.cart_open = False


def open_checkout(state: ShopState) -> None:
    """Show the checkout sheet; it replaces the cart panel on screen."""
    state.checkout_open = True
    state.cart_open = False


def cancel_checkout(state: ShopState) -> None:
    """Close the checkout sheet, keeping cart and form as they are."""
    state.checkout_open = False
