"""
storefront/checkout/__init__.py
-------------------------------
Checkout blueprint: checkout sheet, form fields and order submission.
URL prefix: /checkout
"""
from flask import Blueprint

checkout = Blueprint('checkout', __name__)

from storefront.checkout import routes  # noqa: F401, E402
