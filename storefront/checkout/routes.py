from flask import abort, current_app, request

from storefront.checkout import checkout
from storefront.checkout.validators import parse_order_form, validate_order_form
from storefront.notifications import flash_sink
from storefront.shop.cart import cart_count, cart_total
from storefront.shop.order import submit_order, update_form_field
from storefront.shop.state import cancel_checkout, load_state, open_checkout, save_state
from storefront.utils.htmx import respond


# ── CHECKOUT SHEET ────────────────────────────────────────────────

@checkout.route('/open', methods=['POST'])
def open_sheet():
    state = load_state()
    open_checkout(state)
    save_state(state)
    return respond(state)


@checkout.route('/cancel', methods=['POST'])
def cancel():
    state = load_state()
    cancel_checkout(state)
    save_state(state)
    return respond(state)


# ── FORM FIELD (HTMX, on change) ──────────────────────────────────

@checkout.route('/field', methods=['POST'])
def update_field():
    """
    HTMX endpoint: keep one form field in the session as the visitor types.
    Posts `field` (name/email/phone/address) and either `value` or the
    input itself under its own name.
    """
    field = request.form.get('field', '')
    value = request.form.get('value')
    if value is None:
        value = request.form.get(field, '')

    state = load_state()
    try:
        update_form_field(state.order_form, field, value)
    except ValueError as exc:
        current_app.logger.warning(f"Rejected form field update: {exc}")
        abort(400)
    save_state(state)

    return '', 204


# ── SUBMIT ORDER ──────────────────────────────────────────────────

@checkout.route('/submit', methods=['POST'])
def submit():
    """
    Submit the order:
      1. Copy posted fields into the session form
      2. Check required fields are present (input layer)
      3. submit_order(): empty cart → destructive notice, nothing changes;
         otherwise cart cleared, form reset, sheet closed
    """
    state = load_state()

    for field, value in parse_order_form(request.form).items():
        if field in request.form:
            update_form_field(state.order_form, field, value)

    errors = validate_order_form(state.order_form.to_dict())
    if errors:
        save_state(state)
        current_app.logger.info(f"Checkout form incomplete: {', '.join(sorted(errors))}")
        return respond(state, form_errors=errors)

    # Snapshot for the log line; submit_order() clears the cart on success
    total, count = cart_total(state.cart), cart_count(state.cart)

    notification = submit_order(state)
    flash_sink(notification)
    save_state(state)

    if notification.is_destructive:
        current_app.logger.warning("Order rejected: cart is empty")
    else:
        current_app.logger.info(f"Order placed: {count} item(s) | Total: {total}")

    return respond(state)

