"""Runtime configuration defaults for pricing and logging."""

from __future__ import annotations

import os

from lunchtray.errors import ConfigError

_TAX_RATE_ENV = "LUNCHTRAY_TAX_RATE"
_LOG_PATH_ENV = "LUNCHTRAY_LOG_PATH"
_LOG_LEVEL_ENV = "LUNCHTRAY_LOG_LEVEL"

DEFAULT_TAX_RATE = 0.08
CURRENCY_SYMBOL = "$"
DEFAULT_LOG_PATH = "/tmp/lunchtray.log"
DEFAULT_LOG_LEVEL = "INFO"
_LOG_LEVEL_NAMES = ("CRITICAL", "FATAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET")


def parse_tax_rate(raw: str | None) -> float:
    """Parse a tax rate override; empty values fall back to the default."""
    if raw is None or not raw.strip():
        return DEFAULT_TAX_RATE
    try:
        rate = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{_TAX_RATE_ENV} must be a number, got {raw!r}") from exc
    if not (0 <= rate < 1):
        raise ConfigError(f"{_TAX_RATE_ENV} must be between 0 and 1, got {rate}")
    return rate


def parse_log_level(raw: str | None) -> str:
    """Normalize a log level name; unknown names fall back to the default."""
    if raw is None or not raw.strip():
        return DEFAULT_LOG_LEVEL
    name = raw.strip().upper()
    if name not in _LOG_LEVEL_NAMES:
        return DEFAULT_LOG_LEVEL
    return name


TAX_RATE = parse_tax_rate(os.environ.get(_TAX_RATE_ENV))
LOG_PATH = os.environ.get(_LOG_PATH_ENV) or DEFAULT_LOG_PATH
LOG_LEVEL = parse_log_level(os.environ.get(_LOG_LEVEL_ENV))
