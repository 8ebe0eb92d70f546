"""Domain models for the lunch tray order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MenuKind(str, Enum):
    """Which slot of the tray a menu item fills."""

    ENTREE = "entree"
    SIDE_DISH = "side_dish"
    ACCOMPANIMENT = "accompaniment"


@dataclass(frozen=True)
class MenuItem:
    """A static catalog entry."""

    item_id: str
    name: str
    description: str
    price: float
    kind: MenuKind
    image: str = ""


@dataclass(frozen=True)
class OrderTotals:
    """Derived prices for one set of selections."""

    item_total_price: float = 0.0
    order_tax: float = 0.0
    order_total_price: float = 0.0


@dataclass(frozen=True)
class OrderUiState:
    """Current selections plus the totals derived from them."""

    entree: MenuItem | None = None
    side_dish: MenuItem | None = None
    accompaniment: MenuItem | None = None
    item_total_price: float = 0.0
    order_tax: float = 0.0
    order_total_price: float = 0.0

    def selections(self) -> list[MenuItem]:
        return [item for item in (self.entree, self.side_dish, self.accompaniment) if item is not None]

    def selection_for(self, kind: MenuKind) -> MenuItem | None:
        if kind is MenuKind.ENTREE:
            return self.entree
        if kind is MenuKind.SIDE_DISH:
            return self.side_dish
        return self.accompaniment

    @property
    def is_empty(self) -> bool:
        return not self.selections()
