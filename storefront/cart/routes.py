from flask import abort, current_app, render_template, request

from storefront.cart import cart
from storefront.notifications import flash_sink
from storefront.shop.cart import add_to_cart, remove_from_cart, update_quantity
from storefront.shop.catalog import get_product
from storefront.shop.state import close_cart, load_state, open_cart, save_state
from storefront.utils.htmx import respond, shop_context


def _product_id() -> int:
    """Read `product_id` from the posted form; 400 if missing or not an integer."""
    product_id = request.form.get('product_id', type=int)
    if product_id is None:
        abort(400)
    return product_id


# ── CART PANEL ────────────────────────────────────────────────────

@cart.route('/')
def panel():
    """Current cart/checkout fragment (used by HTMX polling and refreshes)."""
    state = load_state()
    return render_template('_panels.html', **shop_context(state))


@cart.route('/open', methods=['POST'])
def open_panel():
    state = load_state()
    open_cart(state)
    save_state(state)
    return respond(state)


@cart.route('/close', methods=['POST'])
def close_panel():
    state = load_state()
    close_cart(state)
    save_state(state)
    return respond(state)


# ── ADD ITEM (HTMX) ───────────────────────────────────────────────

@cart.route('/add', methods=['POST'])
def add_item():
    """
    HTMX endpoint: add one unit of a catalog product to the session cart.
    Unknown product ids are a 404; the catalog page only posts known ids.
    """
    product = get_product(_product_id())
    if product is None:
        abort(404)

    state = load_state()
    flash_sink(add_to_cart(state.cart, product))
    save_state(state)

    current_app.logger.debug(f"Cart add: product {product.id} ({len(state.cart)} lines)")
    return respond(state)


# ── REMOVE ITEM (HTMX) ────────────────────────────────────────────

@cart.route('/remove', methods=['POST'])
def remove_item():
    """HTMX endpoint: drop a line from the cart. Absent ids are ignored."""
    product_id = _product_id()

    state = load_state()
    remove_from_cart(state.cart, product_id)
    save_state(state)

    current_app.logger.debug(f"Cart remove: product {product_id}")
    return respond(state)


# ── UPDATE QUANTITY (HTMX) ────────────────────────────────────────

@cart.route('/update', methods=['POST'])
def update_item():
    """
    HTMX endpoint: set a line's quantity (the −/+ buttons post qty∓1).
    0 or below removes the line.
    """
    product_id = _product_id()
    quantity   = request.form.get('quantity', type=int)
    if quantity is None:
        abort(400)

    state = load_state()
    update_quantity(state.cart, product_id, quantity)
    save_state(state)

    current_app.logger.debug(f"Cart update: product {product_id} -> qty {quantity}")
    return respond(state)
