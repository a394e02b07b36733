"""
storefront/utils/htmx.py
────────────────────────
Explicit re-render after a state transition.

Every cart/checkout action ends in respond(state):
  - HTMX request → the `#shop-panels` fragment (cart panel, checkout panel,
    out-of-band header badge and toasts) plus an `HX-Trigger:
    shop-state-changed` header so other widgets can refresh.
  - plain form post → redirect back to the catalog page.
"""
from flask import make_response, redirect, render_template, request, url_for

from storefront.shop.cart import cart_count, cart_total, order_lines
from storefront.shop.catalog import all_products


STATE_CHANGED_EVENT = 'shop-state-changed'


def is_htmx() -> bool:
    return bool(request.headers.get('HX-Request'))


def shop_context(state, form_errors=None) -> dict:
    """Template context for anything that shows cart or checkout state."""
    return {
        'state':       state,
        'cart':        state.cart,
        'cart_total':  cart_total(state.cart),
        'cart_count':  cart_count(state.cart),
        'order_lines': list(order_lines(state.cart)),
        'order_form':  state.order_form,
        'form_errors': form_errors or {},
    }


def respond(state, form_errors=None):
    if is_htmx():
        html = render_template('_panels.html', **shop_context(state, form_errors))
        resp = make_response(html)
        resp.headers['HX-Trigger'] = STATE_CHANGED_EVENT
        return resp

    if form_errors:
        # No JS: show the whole page again with the errors inline
        return render_template(
            'main/index.html',
            products=all_products(),
            **shop_context(state, form_errors),
        )
    return redirect(url_for('main.index'))
