"""
Roman Numerals — Bidirectional Arabic ↔ Roman numeral conversion.

Architecture: Raw input → Matcher (shape + operand) → Codec (1–3999) → Result text
Philosophy:  Reject anything that is not the canonical encoding. Never "correct" input.
"""

__version__ = "1.0.0"
