"""
Custom exception hierarchy for numeral conversion.

The codec raises these; the plugin layer turns them into human-readable
text so nothing is ever thrown across the host-facing boundary.
"""

from __future__ import annotations


class RomanNumeralError(Exception):
    """Base exception for all numeral conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NumeralRangeError(RomanNumeralError):
    """The integer has no Roman numeral encoding (outside 1–3999)."""

    def __init__(self, value: int, minimum: int, maximum: int):
        super().__init__(
            "OUT_OF_RANGE",
            f"{value} is out of range ({minimum}–{maximum})",
            {"value": value, "min": minimum, "max": maximum},
        )


class NumeralSyntaxError(RomanNumeralError):
    """The string is not the canonical Roman numeral of any value in range."""

    def __init__(self, numeral: str, reason: str = ""):
        message = f'invalid roman numeral "{numeral}"'
        if reason:
            message = f"{message}: {reason}"
        super().__init__("INVALID_NUMERAL", message, {"numeral": numeral, "reason": reason})
