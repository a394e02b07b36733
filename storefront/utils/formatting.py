"""
storefront/utils/formatting.py
──────────────────────────────
Display helpers registered as Jinja filters.

Prices are whole currency units (int). Formatting mirrors the ru-RU locale:
thousands grouped with a no-break space, then a plain space and the
currency suffix.
    12990  →  "12 990 ₽"
"""

NBSP = '\u00a0'


def group_thousands(value: int) -> str:
    """12990 → '12 990' (no-break space as the group separator)."""
    return f"{int(value):,}".replace(',', NBSP)


def format_price(value: int, suffix: str = '₽') -> str:
    """Format a whole-unit price for display, e.g. '24 990 ₽'."""
    if not suffix:
        return group_thousands(value)
    return f"{group_thousands(value)} {suffix}"
