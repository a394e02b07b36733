import click
from flask import Flask
from config import config


def create_app(config_name='default'):
    """Application factory — creates and configures the Flask app."""
    app = Flask(__name__)
    app.config.from_object(config[config_name])

    if not app.config.get('SECRET_KEY'):
        raise RuntimeError('SECRET_KEY must be set: the cart lives in the signed session cookie.')

    # ── Logging ───────────────────────────────────────────────────
    from storefront.utils.logging import setup_logging
    setup_logging(app)

    # ── Blueprints ────────────────────────────────────────────────
    from storefront.main import main as main_blueprint
    app.register_blueprint(main_blueprint)

    from storefront.cart import cart as cart_blueprint
    app.register_blueprint(cart_blueprint, url_prefix='/cart')

    from storefront.checkout import checkout as checkout_blueprint
    app.register_blueprint(checkout_blueprint, url_prefix='/checkout')

    # ── Error Handlers ────────────────────────────────────────────
    @app.errorhandler(400)
    def bad_request(e):
        from flask import render_template
        return render_template('errors/400.html', title='Bad Request'), 400

    @app.errorhandler(404)
    def not_found(e):
        from flask import render_template
        return render_template('errors/404.html', title='Page Not Found'), 404

    @app.errorhandler(500)
    def internal_error(e):
        from flask import render_template
        app.logger.error(f"Unhandled error: {e}")
        return render_template('errors/500.html', title='Server Error'), 500

    # ── Templates ─────────────────────────────────────────────────
    from storefront.utils.formatting import format_price
    from storefront.notifications import pop_notifications

    @app.template_filter('price')
    def price_filter(value):
        """{{ product.price|price }} → '12 990 ₽'"""
        return format_price(value, app.config.get('CURRENCY_SUFFIX', ''))

    @app.context_processor
    def inject_config():
        """Make shop settings and the toast queue available in templates."""
        return dict(
            config=app.config,
            shop_name=app.config.get('SHOP_NAME', 'SHOP'),
            pop_notifications=pop_notifications,
        )

    # ── CLI Commands ──────────────────────────────────────────────
    register_commands(app)

    # ── ProxyFix (HTTPS termination at the load balancer) ─────────
    from werkzeug.middleware.proxy_fix import ProxyFix
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    return app


def register_commands(app):
    """Register custom Flask CLI commands."""

    @app.cli.command('show-catalog')
    def show_catalog():
        """Show the product catalog (diagnostic)."""
        from storefront.shop.catalog import all_products
        from storefront.utils.formatting import group_thousands

        click.echo(f'{"ID":<4} {"Name":<24} {"Price":>10}')
        click.echo('─' * 40)
        for product in all_products():
            click.echo(f'{product.id:<4} {product.name:<24} {group_thousands(product.price):>10}')

    @app.cli.command('price-cart')
    @click.argument('lines', nargs=-1, required=True)
    def price_cart(lines):
        """
        Price an ad-hoc cart, e.g. `flask price-cart 1 1 2:3`.

        Each LINE is PRODUCT_ID or PRODUCT_ID:QTY. Repeating an id adds
        another unit; an explicit QTY sets the line quantity (0 removes it).
        """
        from storefront.shop.cart import add_to_cart, cart_count, cart_total, update_quantity
        from storefront.shop.catalog import get_product
        from storefront.utils.formatting import format_price

        cart = []
        for line in lines:
            raw_id, _, raw_qty = line.partition(':')
            try:
                product_id = int(raw_id)
                quantity = int(raw_qty) if raw_qty else None
            except ValueError:
                raise click.BadParameter(f'"{line}" is not ID or ID:QTY.', param_hint='LINES')

            product = get_product(product_id)
            if product is None:
                raise click.BadParameter(f'No product with id {product_id}.', param_hint='LINES')

            add_to_cart(cart, product)
            if quantity is not None:
                update_quantity(cart, product_id, quantity)

        suffix = app.config.get('CURRENCY_SUFFIX', '')
        for item in cart:
            click.echo(f'{item.name:<24} × {item.quantity:<4} {format_price(item.line_total, suffix):>14}')
        click.echo('─' * 45)
        click.echo(f'{"Items":<24}   {cart_count(cart):<4} {format_price(cart_total(cart), suffix):>14}')
