"""
storefront/cart/__init__.py
---------------------------
Cart blueprint (HTMX endpoints).
URL prefix: /cart
"""
from flask import Blueprint

cart = Blueprint('cart', __name__)

from storefront.cart import routes  # noqa: F401, E402
