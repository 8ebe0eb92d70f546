"""Textual screens for each step of the ordering flow."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Header, Static

from lunchtray.models import MenuItem, OrderUiState
from lunchtray.rendering import format_menu_option, format_order_summary, format_subtotal

_SHARED_CSS = """
#dialog {
    height: 1fr;
    border: round $primary;
    padding: 1 2;
}

.screen-title {
    text-style: bold;
    margin-bottom: 1;
}

.screen-help {
    margin-top: 1;
    color: $text-muted;
}
"""


class StartOrderScreen(Screen[None]):
    """Landing screen with a single Start Order action."""

    BINDINGS = [
        ("enter", "start_order", "Start Order"),
        ("space", "start_order", "Start Order"),
    ]

    CSS = _SHARED_CSS

    def __init__(self, on_start_order: Callable[[], None]) -> None:
        super().__init__()
        self.on_start_order = on_start_order

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="dialog"):
            yield Static("Lunch Tray", classes="screen-title")
            yield Static("Build a tray: one entree, one side dish and one accompaniment.", id="start-body")
            yield Static("Enter Start Order. Ctrl+Q quit.", classes="screen-help")

    def action_start_order(self) -> None:
        self.on_start_order()


class MenuScreen(Screen[None]):
    """Radio-list of options for one tray slot with Cancel and Next actions."""

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next option"),
        ("k", "move_cursor(-1)", "Previous"),
        ("j", "move_cursor(1)", "Next option"),
        ("enter", "select_current", "Select"),
        ("space", "select_current", "Select"),
        ("n", "next", "Next"),
        ("c", "cancel", "Cancel"),
        ("escape", "app.navigate_up", "Back"),
    ]

    CSS = _SHARED_CSS + """
    #menu-options {
        height: auto;
    }

    #menu-subtotal {
        margin-top: 1;
    }

    #menu-status {
        color: #ffb3b3;
    }
    """

    heading = "Menu"
    cursor_index = reactive(0)
    subtotal = reactive(0.0)

    def __init__(
        self,
        options: list[MenuItem],
        selected: MenuItem | None,
        subtotal: float,
        on_selection_changed: Callable[[MenuItem], None],
        on_next: Callable[[], None],
        on_cancel: Callable[[], None],
    ) -> None:
        super().__init__()
        self.options = options
        self.selected = selected
        self.on_selection_changed = on_selection_changed
        self.on_next = on_next
        self.on_cancel = on_cancel
        self.status = ""
        self.set_reactive(MenuScreen.subtotal, subtotal)
        if selected is not None and selected in options:
            self.set_reactive(MenuScreen.cursor_index, options.index(selected))

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="dialog"):
            yield Static(self.heading, classes="screen-title")
            yield Static(id="menu-options")
            yield Static(id="menu-subtotal")
            yield Static(id="menu-status")
            yield Static("J/K/↑/↓ move, Enter select, N next, C cancel, Esc back", classes="screen-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def watch_subtotal(self, _old: float, _new: float) -> None:
        if self.is_mounted:
            self._refresh_content()

    def action_move_cursor(self, delta: int) -> None:
        if not self.options:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.options)
        self._refresh_content()

    def action_select_current(self) -> None:
        if not self.options:
            return
        item = self.options[self.cursor_index]
        self.selected = item
        self.status = ""
        self.on_selection_changed(item)
        self._refresh_content()

    def action_next(self) -> None:
        if self.selected is None:
            self.status = "Select an option first."
            self._refresh_content()
            return
        self.on_next()

    def action_cancel(self) -> None:
        self.on_cancel()

    def _refresh_content(self) -> None:
        lines = Text()
        for idx, item in enumerate(self.options):
            if idx > 0:
                lines.append("\n")
            lines.append_text(format_menu_option(item, selected=item == self.selected, highlighted=idx == self.cursor_index))
        self.query_one("#menu-options", Static).update(lines)
        self.query_one("#menu-subtotal", Static).update(format_subtotal(self.subtotal))
        self.query_one("#menu-status", Static).update(self.status)


class EntreeMenuScreen(MenuScreen):
    heading = "Choose Entree"


class SideDishMenuScreen(MenuScreen):
    heading = "Choose Side Dish"


class AccompanimentMenuScreen(MenuScreen):
    heading = "Choose Accompaniment"


class CheckoutScreen(Screen[None]):
    """Order summary with Submit and Cancel actions."""

    BINDINGS = [
        ("s", "submit", "Submit"),
        ("enter", "submit", "Submit"),
        ("c", "cancel", "Cancel"),
        ("escape", "app.navigate_up", "Back"),
    ]

    CSS = _SHARED_CSS

    def __init__(
        self,
        order_ui_state: OrderUiState,
        on_submit: Callable[[], None],
        on_cancel: Callable[[], None],
    ) -> None:
        super().__init__()
        self.order_ui_state = order_ui_state
        self.on_submit = on_submit
        self.on_cancel = on_cancel

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="dialog"):
            yield Static("Order Checkout", classes="screen-title")
            yield Static(id="checkout-summary")
            yield Static("S/Enter submit, C cancel, Esc back", classes="screen-help")

    def on_mount(self) -> None:
        self.query_one("#checkout-summary", Static).update(format_order_summary(self.order_ui_state))

    def action_submit(self) -> None:
        self.on_submit()

    def action_cancel(self) -> None:
        self.on_cancel()
