"""
storefront/main/routes.py
─────────────────────────
Catalog page and health check.
"""
from datetime import datetime, timezone

from flask import current_app, jsonify, render_template, request

from storefront.main import main
from storefront.shop.catalog import all_products
from storefront.shop.state import load_state
from storefront.utils.htmx import shop_context


@main.route('/')
def index():
    """Catalog grid, header cart badge, cart panel and checkout sheet."""
    state = load_state()
    return render_template(
        'main/index.html',
        title='Catalog',
        products=all_products(),
        **shop_context(state),
    )


@main.route('/health')
def health():
    """Health check for load balancers and monitoring."""
    products = all_products()
    status = 'ok' if products else 'error'
    if status != 'ok':
        current_app.logger.error('Health check failed: catalog is empty')

    response = {
        'status': status,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'details': {
            'catalog_size': len(products),
        },
    }

    # HTMX support for a status widget
    if request.headers.get('HX-Request'):
        color = 'green' if status == 'ok' else 'red'
        return f"""
        <div class="flex items-center justify-between py-2.5">
            <div class="flex items-center gap-3">
                <span class="w-2 h-2 rounded-full bg-{color}-400"></span>
                <span class="text-sm text-gray-600">Catalog</span>
            </div>
            <span class="text-xs px-2.5 py-1 rounded-full font-medium bg-{color}-500/10 text-{color}-600">
                {len(products)} products
            </span>
        </div>
        """

    return jsonify(response), (200 if status == 'ok' else 503)
