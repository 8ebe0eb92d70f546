"""Main Textual app class."""

from __future__ import annotations

import logging
from typing import Callable

from textual.app import App, ScreenStackError
from textual.screen import Screen

from lunchtray.data import menu_for
from lunchtray.models import MenuKind, OrderUiState
from lunchtray.navigation import LunchTrayScreen, NavController
from lunchtray.order_state import OrderViewModel
from lunchtray.pricing import format_price
from lunchtray.screens import (
    AccompanimentMenuScreen,
    CheckoutScreen,
    EntreeMenuScreen,
    MenuScreen,
    SideDishMenuScreen,
    StartOrderScreen,
)

logger = logging.getLogger(__name__)

_MENU_SCREENS: dict[LunchTrayScreen, tuple[type[MenuScreen], MenuKind, str]] = {
    LunchTrayScreen.ENTREE: (EntreeMenuScreen, MenuKind.ENTREE, "update_entree"),
    LunchTrayScreen.SIDE_DISH: (SideDishMenuScreen, MenuKind.SIDE_DISH, "update_side_dish"),
    LunchTrayScreen.ACCOMPANIMENT: (AccompanimentMenuScreen, MenuKind.ACCOMPANIMENT, "update_accompaniment"),
}


class LunchTrayApp(App):
    """A Textual app walking through entree, side dish, accompaniment and checkout."""

    TITLE = "Lunch Tray"
    SUB_TITLE = LunchTrayScreen.START.title

    BINDINGS = [
        ("escape", "navigate_up", "Back"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        view_model: OrderViewModel | None = None,
        nav_controller: NavController | None = None,
    ) -> None:
        super().__init__()
        self.view_model = view_model or OrderViewModel()
        self.nav_controller = nav_controller or NavController()
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def current_lunch_screen(self) -> LunchTrayScreen:
        return self.nav_controller.current_screen

    def on_mount(self) -> None:
        self._unsubscribe = self.view_model.subscribe(self._on_order_changed)
        logger.info("app_mount screen=%s", self.current_lunch_screen.route)
        self.push_screen(self._build_screen(self.current_lunch_screen))
        self._sync_title()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def action_navigate_up(self) -> None:
        if not self.nav_controller.navigate_up():
            return
        self._show_current()

    def start_order(self) -> None:
        self.nav_controller.navigate(LunchTrayScreen.ENTREE)
        self._show_current()

    def go_next(self) -> None:
        self.nav_controller.navigate_next()
        self._show_current()

    def cancel_order(self) -> None:
        logger.info("order_cancelled from=%s", self.current_lunch_screen.route)
        self.view_model.reset_order()
        self.nav_controller.pop_to_start()
        self._show_current()

    def submit_order(self) -> None:
        submitted = self.view_model.submit_order()
        self.nav_controller.pop_to_start()
        self._show_current()
        self.notify(f"Order submitted: {format_price(submitted.order_total_price)}", title="Thank you")

    def _build_screen(self, screen: LunchTrayScreen) -> Screen:
        state = self.view_model.ui_state
        if screen in _MENU_SCREENS:
            screen_cls, kind, callback_name = _MENU_SCREENS[screen]
            return screen_cls(
                options=menu_for(kind),
                selected=state.selection_for(kind),
                subtotal=state.item_total_price,
                on_selection_changed=getattr(self.view_model, callback_name),
                on_next=self.go_next,
                on_cancel=self.cancel_order,
            )
        if screen is LunchTrayScreen.CHECKOUT:
            return CheckoutScreen(order_ui_state=state, on_submit=self.submit_order, on_cancel=self.cancel_order)
        return StartOrderScreen(on_start_order=self.start_order)

    def _show_current(self) -> None:
        logger.debug("show_screen screen=%s depth=%d", self.current_lunch_screen.route, len(self.nav_controller.back_stack))
        self.switch_screen(self._build_screen(self.current_lunch_screen))
        self._sync_title()

    def _sync_title(self) -> None:
        self.sub_title = self.current_lunch_screen.title

    def _on_order_changed(self, state: OrderUiState) -> None:
        try:
            screen = self.screen
        except ScreenStackError:
            return
        if isinstance(screen, MenuScreen):
            screen.subtotal = state.item_total_price
