"""
Deterministic shape classification for free-text conversion requests.

Each recognised phrasing is one anchored, case-insensitive regex.  Shapes are
tried in precedence order and the first hit wins:

    1. "42 to roman" / "42 in roman"        → INTEGER_SUFFIX
    2. "roman 42"                           → INTEGER_PREFIX
    3. "XLII to dec" (decimal/arabic/number) → NUMERAL_TO_INTEGER
    4. "XIV"  (a valid numeral by itself)   → BARE_NUMERAL

Anything else is not ours: classify() returns None and the host can offer
the input to another handler.  Classification is pure; the operand is
re-derived from the input on every call.
"""

from __future__ import annotations

import logging
import re

from .codec import is_numeral
from .models import MatchResult, Shape

logger = logging.getLogger(__name__)


# ─── Patterns ────────────────────────────────────────────────────────
# Matched with fullmatch(). Digits are ASCII only so the operand is always a
# literal int() accepts; \s is left Unicode-aware (NBSP, em space, ...).

_FLAGS = re.IGNORECASE

TO_ROMAN_RE = re.compile(r"([0-9]+)\s+(?:to|in)\s+roman", _FLAGS)
ROMAN_PREFIX_RE = re.compile(r"roman\s+([0-9]+)", _FLAGS)
TO_DECIMAL_RE = re.compile(
    r"([MDCLXVI]+)\s+(?:to|in)\s+(?:dec|decimal|arabic|number)", _FLAGS
)

_STRUCTURED_SHAPES: tuple[tuple[Shape, re.Pattern[str]], ...] = (
    (Shape.INTEGER_SUFFIX, TO_ROMAN_RE),
    (Shape.INTEGER_PREFIX, ROMAN_PREFIX_RE),
    (Shape.NUMERAL_TO_INTEGER, TO_DECIMAL_RE),
)


# ─── Classifier ──────────────────────────────────────────────────────


def classify(text: str) -> MatchResult | None:
    """Classify raw input into one request shape.

    Args:
        text: The raw input, e.g. "42 to roman".

    Returns:
        MatchResult with the shape and extracted operand, or None when the
        input fits no shape.
    """
    for shape, pattern in _STRUCTURED_SHAPES:
        match = pattern.fullmatch(text)
        if match:
            logger.debug("Classified %r as %s (operand %r)", text, shape.value, match.group(1))
            return MatchResult(shape=shape, operand=match.group(1))

    stripped = text.strip()
    if is_numeral(stripped):
        logger.debug("Classified %r as %s", text, Shape.BARE_NUMERAL.value)
        return MatchResult(shape=Shape.BARE_NUMERAL, operand=stripped)

    logger.debug("No shape matched %r", text)
    return None
