"""Order view-model: selection events, the reducer, and the stateful holder."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Union

from lunchtray.config import TAX_RATE
from lunchtray.errors import InvalidSelectionError
from lunchtray.models import MenuItem, MenuKind, OrderUiState
from lunchtray.pricing import calculate_totals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectEntree:
    item: MenuItem


@dataclass(frozen=True)
class SelectSideDish:
    item: MenuItem


@dataclass(frozen=True)
class SelectAccompaniment:
    item: MenuItem


@dataclass(frozen=True)
class CancelOrder:
    pass


@dataclass(frozen=True)
class SubmitOrder:
    pass


OrderEvent = Union[SelectEntree, SelectSideDish, SelectAccompaniment, CancelOrder, SubmitOrder]

_FIELD_BY_EVENT: dict[type, tuple[str, MenuKind]] = {
    SelectEntree: ("entree", MenuKind.ENTREE),
    SelectSideDish: ("side_dish", MenuKind.SIDE_DISH),
    SelectAccompaniment: ("accompaniment", MenuKind.ACCOMPANIMENT),
}


def with_totals(state: OrderUiState, tax_rate: float = TAX_RATE) -> OrderUiState:
    """Return state with its price fields recomputed from its selections."""
    totals = calculate_totals(state.entree, state.side_dish, state.accompaniment, tax_rate)
    return replace(
        state,
        item_total_price=totals.item_total_price,
        order_tax=totals.order_tax,
        order_total_price=totals.order_total_price,
    )


def reduce(state: OrderUiState, event: OrderEvent, tax_rate: float = TAX_RATE) -> OrderUiState:
    """Apply one event and return the new state; the input is never mutated."""
    if isinstance(event, (CancelOrder, SubmitOrder)):
        return OrderUiState()

    target = _FIELD_BY_EVENT.get(type(event))
    if target is None:
        raise TypeError(f"Unsupported order event: {event!r}")

    field_name, kind = target
    if event.item.kind is not kind:
        raise InvalidSelectionError(f"{event.item.name} is a {event.item.kind.value}, not a {kind.value}")
    return with_totals(replace(state, **{field_name: event.item}), tax_rate)


class OrderViewModel:
    """Holds the order UI state and exposes the callbacks screens invoke."""

    def __init__(self, tax_rate: float = TAX_RATE) -> None:
        self.tax_rate = tax_rate
        self._state = OrderUiState()
        self._listeners: list[Callable[[OrderUiState], None]] = []

    @property
    def ui_state(self) -> OrderUiState:
        return self._state

    def subscribe(self, listener: Callable[[OrderUiState], None]) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: OrderEvent) -> OrderUiState:
        self._state = reduce(self._state, event, self.tax_rate)
        logger.info(
            "order_event event=%s subtotal=%.2f tax=%.2f total=%.2f",
            type(event).__name__,
            self._state.item_total_price,
            self._state.order_tax,
            self._state.order_total_price,
        )
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def update_entree(self, item: MenuItem) -> None:
        self.dispatch(SelectEntree(item))

    def update_side_dish(self, item: MenuItem) -> None:
        self.dispatch(SelectSideDish(item))

    def update_accompaniment(self, item: MenuItem) -> None:
        self.dispatch(SelectAccompaniment(item))

    def reset_order(self) -> None:
        self.dispatch(CancelOrder())

    def submit_order(self) -> OrderUiState:
        """Clear the order and return the state that was submitted."""
        submitted = self._state
        logger.info(
            "order_submitted items=%s total=%.2f",
            ",".join(item.item_id for item in submitted.selections()) or "-",
            submitted.order_total_price,
        )
        self.dispatch(SubmitOrder())
        return submitted
