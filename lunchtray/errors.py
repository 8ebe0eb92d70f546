"""Exception types raised by the lunch tray core."""

from __future__ import annotations


class LunchTrayError(Exception):
    """Base class for lunch tray errors."""


class ConfigError(LunchTrayError):
    """Raised when an environment override cannot be parsed."""


class UnknownMenuItemError(LunchTrayError, KeyError):
    """Raised when a menu item id is not in the catalog."""

    def __init__(self, item_id: str) -> None:
        super().__init__(item_id)
        self.item_id = item_id

    def __str__(self) -> str:
        return f"Unknown menu item: {self.item_id!r}"


class InvalidSelectionError(LunchTrayError, ValueError):
    """Raised when an item is offered for the wrong menu slot."""
