"""File logging setup; Textual owns the terminal so nothing goes to stdout."""

from __future__ import annotations

import logging
from pathlib import Path

from lunchtray.config import LOG_LEVEL, LOG_PATH, parse_log_level

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class _LunchTrayFileHandler(logging.FileHandler):
    """Marker subclass so repeated setup calls can find the installed handler."""


class _LunchTrayNullHandler(logging.NullHandler):
    """Installed instead of the file handler when the log file cannot be opened."""


def setup_logging(path: str | None = None, level: str | None = None) -> None:
    """Attach the app file handler to the package logger once."""
    logger = logging.getLogger("lunchtray")
    logger.setLevel(parse_log_level(level) if level else LOG_LEVEL)
    if any(isinstance(h, (_LunchTrayFileHandler, _LunchTrayNullHandler)) for h in logger.handlers):
        return

    log_file = Path(path or LOG_PATH)
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = _LunchTrayFileHandler(log_file, encoding="utf-8")
    except OSError:
        # Logging must never interfere with app flow.
        logger.addHandler(_LunchTrayNullHandler())
        return
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
