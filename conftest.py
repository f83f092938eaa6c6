"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture
def plugin():
    """A fresh plugin instance per test."""
    from roman_numerals.plugin import RomanNumeralPlugin

    return RomanNumeralPlugin()
