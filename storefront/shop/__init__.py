"""
storefront/shop
---------------
Framework-free storefront logic: catalog, cart transitions, order
submission and the per-visitor ShopState. The blueprints in storefront.cart,
storefront.checkout and storefront.main drive these modules from requests.
"""
