"""
Environment-driven settings.

Only one knob today: ROMAN_LOG_LEVEL (DEBUG, INFO, WARNING, ...). Unknown
values fall back to WARNING instead of failing at startup.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "ROMAN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def log_level(value: str | None = None) -> int:
    """Resolve a level name (default: $ROMAN_LOG_LEVEL) to a logging level int."""
    if value is None:
        value = os.environ.get(LOG_LEVEL_ENV, "")
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        return DEFAULT_LOG_LEVEL
    return level
