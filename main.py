#!/usr/bin/env python3
"""
Roman Numerals — Entry Point
=============================

Converts each command-line argument, or runs the built-in examples.

Usage:
    python main.py                              # Run the example requests
    python main.py "42 to roman" "XIV"          # Convert your own
    ROMAN_LOG_LEVEL=DEBUG python main.py XIV    # Show classification logs
"""

from __future__ import annotations

import logging
import sys

from roman_numerals.config import log_level
from roman_numerals.plugin import RomanNumeralPlugin

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 60


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_conversions(plugin: RomanNumeralPlugin, inputs: list[str]) -> int:
    """Evaluate and print each input.

    Returns:
        0 if every input matched and converted cleanly, 1 otherwise.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  ROMAN NUMERAL CONVERSIONS{_RESET}")
    print(f"{'=' * _WIDTH}")

    failures = 0
    for text in inputs:
        found = plugin.classify(text)
        if found is None:
            failures += 1
            print(f"  {text!r:<24} {_DIM}→ (not a numeral request){_RESET}")
            continue

        result = plugin.convert(found)
        if result is None or result.startswith("Error:"):
            failures += 1
            print(f"  {text!r:<24} → {_RED}{result}{_RESET}")
        else:
            print(f"  {text!r:<24} → {_GREEN}{_BOLD}{result}{_RESET}  {_DIM}[{found.shape.value}]{_RESET}")

    print(f"{'=' * _WIDTH}\n")
    return 0 if failures == 0 else 1


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert the given inputs (or the plugin examples) and print the results."""
    logging.basicConfig(
        level=log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    args = sys.argv[1:] if argv is None else argv
    plugin = RomanNumeralPlugin()
    inputs = args or [example.input for example in plugin.examples()]
    return print_conversions(plugin, inputs)


if __name__ == "__main__":
    sys.exit(main())
