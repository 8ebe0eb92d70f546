"""Screen enum and back-stack navigation controller."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class LunchTrayScreen(Enum):
    """Screens of the ordering flow, in forward order."""

    START = ("Start", "Lunch Tray")
    ENTREE = ("Entree", "Choose Entree")
    SIDE_DISH = ("SideDish", "Choose Side Dish")
    ACCOMPANIMENT = ("Accompaniment", "Choose Accompaniment")
    CHECKOUT = ("Checkout", "Order Checkout")

    def __init__(self, route: str, title: str) -> None:
        self.route = route
        self.title = title

    def next(self) -> LunchTrayScreen:
        """The screen after this one; Checkout is the last."""
        members = list(LunchTrayScreen)
        idx = members.index(self)
        return members[min(idx + 1, len(members) - 1)]


_SCREEN_BY_ROUTE: dict[str, LunchTrayScreen] = {screen.route: screen for screen in LunchTrayScreen}


def screen_from_route(route: str | None) -> LunchTrayScreen:
    """Resolve a route name; missing or unrecognized routes fall back to Start."""
    if route is None:
        return LunchTrayScreen.START
    screen = _SCREEN_BY_ROUTE.get(route)
    if screen is None:
        logger.warning("unknown_route route=%r defaulting to %s", route, LunchTrayScreen.START.route)
        return LunchTrayScreen.START
    return screen


class NavController:
    """A back stack of screens that always has Start at the bottom."""

    def __init__(self) -> None:
        self._stack: list[LunchTrayScreen] = [LunchTrayScreen.START]

    @property
    def current_screen(self) -> LunchTrayScreen:
        return self._stack[-1]

    @property
    def can_navigate_back(self) -> bool:
        return len(self._stack) > 1

    @property
    def back_stack(self) -> list[LunchTrayScreen]:
        return list(self._stack)

    def navigate(self, screen: LunchTrayScreen) -> LunchTrayScreen:
        if screen is LunchTrayScreen.START:
            return self.pop_to_start()
        if screen is not self.current_screen:
            self._stack.append(screen)
        logger.debug("navigate to=%s depth=%d", screen.route, len(self._stack))
        return screen

    def navigate_next(self) -> LunchTrayScreen:
        if self.current_screen is LunchTrayScreen.CHECKOUT:
            return self.current_screen
        return self.navigate(self.current_screen.next())

    def navigate_up(self) -> bool:
        """Pop one screen; returns False when already at Start."""
        if not self.can_navigate_back:
            return False
        popped = self._stack.pop()
        logger.debug("navigate_up from=%s to=%s", popped.route, self.current_screen.route)
        return True

    def pop_to_start(self) -> LunchTrayScreen:
        del self._stack[1:]
        logger.debug("pop_to_start")
        return LunchTrayScreen.START
