import logging

import pytest

from lunchtray.data import item_by_id
from lunchtray.order_state import OrderViewModel


@pytest.fixture
def entree():
    return item_by_id("cauliflower")


@pytest.fixture
def side_dish():
    return item_by_id("summer_salad")


@pytest.fixture
def accompaniment():
    return item_by_id("lunch_roll")


@pytest.fixture
def view_model():
    """A fresh view-model using the default 8% tax rate."""
    return OrderViewModel(tax_rate=0.08)


@pytest.fixture(autouse=True)
def _isolate_package_logger():
    """Drop handlers tests attach to the package logger."""
    logger = logging.getLogger("lunchtray")
    original = list(logger.handlers)
    original_level = logger.level
    yield
    logger.setLevel(original_level)
    for handler in logger.handlers:
        if handler not in original:
            handler.close()
    logger.handlers = original
