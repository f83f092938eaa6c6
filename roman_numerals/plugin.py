"""
Host-facing plugin: registration metadata plus the two-phase match/evaluate API.

Flow:
  ┌───────────┐
  │ Raw input │
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Matcher  │   ← Shape + operand, or "not ours"
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │   Codec   │   ← Strict 1–3999 conversion
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │  Result   │   ← Numeral, decimal string, or "Error: ..." text
  └───────────┘

Design principles:
  - match() and evaluate() share no state; evaluate() re-classifies the input.
  - Nothing is thrown across this boundary. Bad values come back as text.
  - A bare numeral is only matched if it is valid, so its evaluation cannot
    fail.  If it somehow does, evaluate() logs it and returns None.
"""

from __future__ import annotations

import logging

from .codec import MAX_VALUE, MIN_VALUE, integer_to_numeral, numeral_to_integer
from .exceptions import NumeralRangeError, NumeralSyntaxError
from .matcher import classify
from .models import MatchResult, PluginExample, PluginMetadata, Shape

logger = logging.getLogger(__name__)


# ─── Registration Metadata ───────────────────────────────────────────

PLUGIN_METADATA = PluginMetadata(
    id="community:roman-numerals",
    name="Roman Numerals",
    version="1.0.0",
    description=f"Convert between arabic and roman numerals ({MIN_VALUE}–{MAX_VALUE})",
    author="bsteinig",
    source="community",
    examples=[
        PluginExample(input="42 to roman", output="XLII"),
        PluginExample(input="roman 2025", output="MMXXV"),
        PluginExample(input="XLII to dec", output="42"),
        PluginExample(input="XIV", output="14"),
    ],
    priority=100,
    result_type="string",
)


class RomanNumeralPlugin:
    """Two-phase numeral conversion handler.

    Usage:
        plugin = RomanNumeralPlugin()
        if plugin.match(text):
            print(plugin.evaluate(text))   # "XLII", "42", or "Error: ..."
    """

    def __init__(self, metadata: PluginMetadata | None = None):
        self.metadata = metadata or PLUGIN_METADATA

    def classify(self, text: str) -> MatchResult | None:
        """Shape and operand for this input, or None if it is not ours."""
        return classify(text)

    def match(self, text: str) -> bool:
        """Does this input belong to us? Pure; safe to call repeatedly."""
        return self.classify(text) is not None

    def evaluate(self, text: str) -> str | None:
        """Convert the input in the direction its shape implies.

        Returns:
            The numeral or decimal string, an "Error: ..." message for an
            out-of-range integer or malformed numeral, or None if the input
            matches no shape.
        """
        result = self.classify(text)
        if result is None:
            return None
        return self.convert(result)

    def convert(self, result: MatchResult) -> str | None:
        """Run the codec for an already-classified request."""
        if result.shape in (Shape.INTEGER_SUFFIX, Shape.INTEGER_PREFIX):
            digits = result.operand.lstrip("0") or "0"
            if len(digits) > len(str(MAX_VALUE)):
                # Also keeps int() clear of the interpreter's str→int digit limit
                logger.info("Rejected oversized integer operand (%d digits)", len(digits))
                return _range_error(digits)
            number = int(digits)
            try:
                return integer_to_numeral(number)
            except NumeralRangeError as e:
                logger.info("Rejected integer operand: %s", e)
                return _range_error(number)

        if result.shape == Shape.NUMERAL_TO_INTEGER:
            try:
                return str(numeral_to_integer(result.operand))
            except NumeralSyntaxError as e:
                logger.info("Rejected numeral operand: %s", e)
                return f'Error: invalid roman numeral "{result.operand}"'

        # BARE_NUMERAL: classify() already proved the operand valid
        try:
            return str(numeral_to_integer(result.operand))
        except NumeralSyntaxError:
            logger.error("Matched bare numeral %r failed to decode", result.operand)
            return None

    def examples(self) -> list[PluginExample]:
        return list(self.metadata.examples)


def _range_error(number: int | str) -> str:
    return f"Error: {number} is out of range ({MIN_VALUE}–{MAX_VALUE})"


# ─── Module-level API ────────────────────────────────────────────────

_default_plugin = RomanNumeralPlugin()


def match(text: str) -> bool:
    """Module-level shortcut for RomanNumeralPlugin().match()."""
    return _default_plugin.match(text)


def evaluate(text: str) -> str | None:
    """Module-level shortcut for RomanNumeralPlugin().evaluate()."""
    return _default_plugin.evaluate(text)
