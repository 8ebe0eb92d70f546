"""
Price calculation for a lunch tray order.

Totals are always recomputed from the current selections.
"""

from __future__ import annotations

from typing import Iterable

from lunchtray.config import CURRENCY_SYMBOL, TAX_RATE
from lunchtray.models import MenuItem, OrderTotals


def round_money(amount: float) -> float:
    """Round to 2 decimal places for currency."""
    return round(amount, 2)


def subtotal(items: Iterable[MenuItem | None]) -> float:
    """Sum the prices of the non-empty selections."""
    return round_money(sum(item.price for item in items if item is not None))


def calculate_totals(
    entree: MenuItem | None,
    side_dish: MenuItem | None,
    accompaniment: MenuItem | None,
    tax_rate: float = TAX_RATE,
) -> OrderTotals:
    """
    Calculate item total, tax and order total for one set of selections.

    Args:
        entree: Selected entree, or None
        side_dish: Selected side dish, or None
        accompaniment: Selected accompaniment, or None
        tax_rate: Fraction of the subtotal charged as tax

    Returns:
        OrderTotals where order_total_price == item_total_price + order_tax
    """
    item_total = subtotal((entree, side_dish, accompaniment))
    tax = round_money(item_total * tax_rate)
    return OrderTotals(
        item_total_price=item_total,
        order_tax=tax,
        order_total_price=round_money(item_total + tax),
    )


def format_price(amount: float) -> str:
    """Format an amount as currency text, e.g. $7.00."""
    if amount < 0:
        return f"-{CURRENCY_SYMBOL}{abs(amount):,.2f}"
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"
