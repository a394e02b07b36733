"""
storefront/shop/catalog.py
--------------------------
The product catalog.

The catalog is a hard-coded, immutable tuple of Product records built once
at import time. There is no loading step and nothing ever mutates it, so the
lookup index below can never go stale.

Ids, prices and image URIs are those of the original Russian-language shop.
Names and descriptions are English translations to match the rest of the UI
(e.g. 'Беспроводные наушники' → 'Wireless Headphones').
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


_CDN = 'https://cdn.poehali.dev/projects/11036952-557e-4312-8248-5f9d3c83d56a/files'

HEADPHONES_IMG = f'{_CDN}/12327bb0-7d6b-4a45-99b0-8033d41f6104.jpg'
WATCH_IMG      = f'{_CDN}/01eb9d84-c088-4c96-8e2a-ac0c31fe989c.jpg'
BACKPACK_IMG   = f'{_CDN}/c06bbb86-05d2-4d1a-9087-dfc30ca922dd.jpg'


@dataclass(frozen=True)
class Product:
    """A catalog entry available for purchase."""
    id:          int
    name:        str
    price:       int     # whole currency units, no minor unit
    image:       str     # opaque URI, never fetched by the app
    description: str

    def __repr__(self):
        return f"<Product {self.id} {self.name!r}>"


PRODUCTS: Tuple[Product, ...] = (
    Product(1, 'Wireless Headphones',  12990, HEADPHONES_IMG, 'Premium sound quality'),
    Product(2, 'Smart Watch',          24990, WATCH_IMG,      'Stylish design and functionality'),
    Product(3, 'Laptop Backpack',       8990, BACKPACK_IMG,   'Modern and practical'),
    Product(4, 'Portable Speaker',      6990, HEADPHONES_IMG, 'Powerful sound in a compact body'),
    Product(5, 'Mechanical Keyboard',  15990, WATCH_IMG,      'Ideal for work and play'),
    Product(6, 'Wireless Mouse',        4990, BACKPACK_IMG,   'Ergonomic design'),
)

_BY_ID: Dict[int, Product] = {p.id: p for p in PRODUCTS}

if len(_BY_ID) != len(PRODUCTS):
    raise RuntimeError('Duplicate product id in catalog.')


# ── Read ──────────────────────────────────────────────────────────

def all_products() -> Tuple[Product, ...]:
    """Return every product, in display order."""
    return PRODUCTS


def get_product(product_id: int) -> Optional[Product]:
    """Return the product with `product_id`, or None if unknown."""
    return _BY_ID.get(product_id)
