"""
Pilot tests driving the Textual app through the ordering flow.
"""

import pytest

from lunchtray.data import item_by_id
from lunchtray.errors import InvalidSelectionError
from lunchtray.lunch_tray_app import LunchTrayApp
from lunchtray.models import OrderUiState
from lunchtray.navigation import LunchTrayScreen
from lunchtray.order_state import OrderViewModel
from lunchtray.screens import (
    AccompanimentMenuScreen,
    CheckoutScreen,
    EntreeMenuScreen,
    SideDishMenuScreen,
    StartOrderScreen,
)


def make_app(view_model=None):
    return LunchTrayApp(view_model=view_model or OrderViewModel(tax_rate=0.08))


async def fill_tray(pilot):
    """Start an order and pick the first option on every menu."""
    await pilot.press("enter")
    await pilot.pause()
    for _ in range(3):
        await pilot.press("enter", "n")
        await pilot.pause()


class TestLunchTrayApp:
    """Tests for the full ordering flow."""

    @pytest.mark.asyncio
    async def test_starts_on_start_screen(self):
        app = make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, StartOrderScreen)
            assert app.sub_title == "Lunch Tray"
            assert app.nav_controller.can_navigate_back is False

    @pytest.mark.asyncio
    async def test_full_flow_reaches_checkout_with_totals(self):
        app = make_app()
        async with app.run_test() as pilot:
            await fill_tray(pilot)

            assert isinstance(app.screen, CheckoutScreen)
            assert app.nav_controller.back_stack == list(LunchTrayScreen)
            assert app.sub_title == "Order Checkout"
            state = app.view_model.ui_state
            assert [item.item_id for item in state.selections()] == ["cauliflower", "summer_salad", "lunch_roll"]
            assert state.order_total_price == 10.8

    @pytest.mark.asyncio
    async def test_next_requires_selection(self):
        app = make_app()
        async with app.run_test() as pilot:
            await pilot.press("enter")
            await pilot.pause()
            await pilot.press("n")
            await pilot.pause()
            assert isinstance(app.screen, EntreeMenuScreen)
            assert app.screen.status == "Select an option first."

    @pytest.mark.asyncio
    async def test_cursor_moves_before_selecting(self):
        app = make_app()
        async with app.run_test() as pilot:
            await pilot.press("enter")
            await pilot.pause()
            await pilot.press("down", "down", "enter")
            await pilot.pause()
            assert app.view_model.ui_state.entree.item_id == "mushroom_pasta"
            assert app.screen.subtotal == 5.5

    @pytest.mark.asyncio
    async def test_back_keeps_selections_and_highlights_choice(self):
        app = make_app()
        async with app.run_test() as pilot:
            await pilot.press("enter")
            await pilot.pause()
            await pilot.press("j", "enter", "n")
            await pilot.pause()
            assert isinstance(app.screen, SideDishMenuScreen)

            await pilot.press("escape")
            await pilot.pause()

            assert isinstance(app.screen, EntreeMenuScreen)
            assert app.screen.selected.item_id == "three_bean_chili"
            assert app.screen.cursor_index == 1
            assert app.view_model.ui_state.entree.item_id == "three_bean_chili"
            assert app.sub_title == "Choose Entree"

    @pytest.mark.asyncio
    async def test_cancel_resets_and_returns_to_start(self):
        app = make_app()
        async with app.run_test() as pilot:
            await pilot.press("enter")
            await pilot.pause()
            await pilot.press("enter", "n")
            await pilot.pause()
            await pilot.press("c")
            await pilot.pause()

            assert isinstance(app.screen, StartOrderScreen)
            assert app.view_model.ui_state == OrderUiState()
            assert app.nav_controller.back_stack == [LunchTrayScreen.START]

    @pytest.mark.asyncio
    async def test_submit_resets_and_returns_to_start(self):
        app = make_app()
        async with app.run_test() as pilot:
            await fill_tray(pilot)
            await pilot.press("s")
            await pilot.pause()

            assert isinstance(app.screen, StartOrderScreen)
            assert app.view_model.ui_state == OrderUiState()
            assert app.nav_controller.can_navigate_back is False

    @pytest.mark.asyncio
    async def test_checkout_back_returns_to_accompaniment(self):
        app = make_app()
        async with app.run_test() as pilot:
            await fill_tray(pilot)
            await pilot.press("escape")
            await pilot.pause()

            assert isinstance(app.screen, AccompanimentMenuScreen)
            assert app.view_model.ui_state.accompaniment.item_id == "lunch_roll"

    @pytest.mark.asyncio
    async def test_menu_screen_only_accepts_its_own_slot(self):
        app = make_app()
        async with app.run_test() as pilot:
            await pilot.press("enter")
            await pilot.pause()
            assert isinstance(app.screen, EntreeMenuScreen)

            with pytest.raises(InvalidSelectionError):
                app.screen.on_selection_changed(item_by_id("summer_salad"))
            assert app.view_model.ui_state == OrderUiState()


class TestViewModelOutsideRun:
    """The shared view-model stays usable while the app is not running."""

    def test_update_before_run(self):
        view_model = OrderViewModel(tax_rate=0.08)
        make_app(view_model)

        view_model.update_entree(item_by_id("cauliflower"))

        assert view_model.ui_state.item_total_price == 7.0

    @pytest.mark.asyncio
    async def test_update_after_exit(self):
        view_model = OrderViewModel(tax_rate=0.08)
        app = make_app(view_model)
        async with app.run_test() as pilot:
            await pilot.pause()

        view_model.update_side_dish(item_by_id("coconut_rice"))

        assert view_model.ui_state.side_dish.item_id == "coconut_rice"
