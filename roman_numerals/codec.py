"""
Deterministic Roman numeral codec — integers 1–3999 only.

Encoding is a greedy walk over a descending (value, symbol) table in which
the subtractive pairs (CM, CD, XC, XL, IX, IV) are atomic entries.

Decoding is a left-to-right scan with one symbol of lookahead, followed by
a canonical round-trip check: the decoded value is re-encoded and must equal
the (uppercased) input exactly.  That single comparison is the grammar.
It rejects "IIII", "VX", "IC", "XVV" and every other string that merely
uses the right alphabet.  We never "correct" a malformed numeral.

    integer_to_numeral(1994)      → "MCMXCIV"
    numeral_to_integer("mcmxciv") → 1994
    numeral_to_integer("IIII")    → NumeralSyntaxError
"""

from __future__ import annotations

from .exceptions import NumeralRangeError, NumeralSyntaxError

# ─── Conversion Tables ───────────────────────────────────────────────

MIN_VALUE = 1
MAX_VALUE = 3999

# Shared by the encoder and the validity check. Keep it the only table.
ROMAN_VALUES: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

SYMBOL_VALUES: dict[str, int] = {
    symbol: value for value, symbol in ROMAN_VALUES if len(symbol) == 1
}

# Accepted input characters, both cases, ASCII only ("ı".upper() == "I").
_ALPHABET: frozenset[str] = frozenset("".join(SYMBOL_VALUES) + "".join(SYMBOL_VALUES).lower())


# ─── Encoder ─────────────────────────────────────────────────────────


def integer_to_numeral(value: int) -> str:
    """Encode an integer as its canonical uppercase Roman numeral.

    Args:
        value: Integer in [1, 3999].

    Returns:
        The canonical numeral, e.g. 42 → "XLII".

    Raises:
        TypeError: If value is not an int (bool is rejected too).
        NumeralRangeError: If value is outside [1, 3999].
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise NumeralRangeError(value, MIN_VALUE, MAX_VALUE)

    parts: list[str] = []
    remaining = value
    for amount, symbol in ROMAN_VALUES:
        while remaining >= amount:
            parts.append(symbol)
            remaining -= amount
    return "".join(parts)


# ─── Decoder ─────────────────────────────────────────────────────────


def numeral_to_integer(numeral: str) -> int:
    """Decode a Roman numeral (any case) to its integer value.

    Surrounding whitespace is not stripped; the caller decides what the
    numeral is.

    Raises:
        NumeralSyntaxError: If the string is empty, uses a symbol outside
            {I, V, X, L, C, D, M}, decodes outside [1, 3999], or is not the
            canonical encoding of the value it decodes to.
    """
    if not numeral:
        raise NumeralSyntaxError(numeral, "empty string")

    invalid = sorted({ch for ch in numeral if ch not in _ALPHABET})
    if invalid:
        raise NumeralSyntaxError(numeral, f"unexpected symbol(s) {''.join(invalid)!r}")

    upper = numeral.upper()

    total = 0
    for i, symbol in enumerate(upper):
        current = SYMBOL_VALUES[symbol]
        following = SYMBOL_VALUES[upper[i + 1]] if i + 1 < len(upper) else 0
        if current < following:
            total -= current
        else:
            total += current

    if not MIN_VALUE <= total <= MAX_VALUE:
        raise NumeralSyntaxError(numeral, f"value {total} outside {MIN_VALUE}–{MAX_VALUE}")

    canonical = integer_to_numeral(total)
    if canonical != upper:
        raise NumeralSyntaxError(numeral, "not in canonical form")

    return total


def is_numeral(text: str) -> bool:
    """True iff `text` is the canonical numeral of some value in [1, 3999]."""
    try:
        numeral_to_integer(text)
    except NumeralSyntaxError:
        return False
    return True
