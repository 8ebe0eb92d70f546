"""Rendering helpers for menu options and the order summary."""

from __future__ import annotations

from rich.text import Text

from lunchtray.models import MenuItem, OrderUiState
from lunchtray.pricing import format_price


def format_menu_option(item: MenuItem, selected: bool, highlighted: bool) -> Text:
    """Render one option as a radio row with its description underneath."""
    text = Text()
    pointer = "➤ " if highlighted else "  "
    radio = "(•)" if selected else "( )"
    text.append(pointer)
    text.append(f"{radio} ")
    text.append(item.name, style="bold" if selected else "")
    text.append(f"  {format_price(item.price)}", style="#5fbf72")
    text.append(f"\n      {item.description}", style="dim")
    return text


def format_subtotal(amount: float) -> Text:
    text = Text()
    text.append("Subtotal: ", style="bold")
    text.append(format_price(amount))
    return text


def _summary_line(text: Text, label: str, amount: float, style: str = "") -> None:
    text.append(f"\n{label}: ", style=style)
    text.append(format_price(amount), style=style)


def format_order_summary(state: OrderUiState) -> Text:
    """Render each selected item with its price, then subtotal, tax and total."""
    text = Text()
    text.append("Order Summary", style="bold")
    selections = state.selections()
    if not selections:
        text.append("\n(no items selected)", style="dim")
    for item in selections:
        text.append(f"\n{item.name}  ")
        text.append(format_price(item.price))

    text.append("\n")
    _summary_line(text, "Subtotal", state.item_total_price)
    _summary_line(text, "Tax", state.order_tax)
    _summary_line(text, "Total", state.order_total_price, style="bold")
    return text
