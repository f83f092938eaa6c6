"""
Pydantic models for classified requests and plugin registration data.

Everything the matcher hands to the plugin layer is typed here, so the
evaluate phase never has to guess what the match phase found.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# ─── Conversion Direction ───────────────────────────────────────────


class Direction(str, Enum):
    """Which way the codec runs for a matched request."""

    TO_NUMERAL = "TO_NUMERAL"  # 42 → XLII
    TO_INTEGER = "TO_INTEGER"  # XLII → 42


# ─── Request Shapes ─────────────────────────────────────────────────


class Shape(str, Enum):
    """The recognised input phrasings, in precedence order."""

    INTEGER_SUFFIX = "INTEGER_SUFFIX"  # "42 to roman", "42 in roman"
    INTEGER_PREFIX = "INTEGER_PREFIX"  # "roman 42"
    NUMERAL_TO_INTEGER = "NUMERAL_TO_INTEGER"  # "XLII to dec"
    BARE_NUMERAL = "BARE_NUMERAL"  # "XIV"

    @property
    def direction(self) -> Direction:
        if self in (Shape.INTEGER_SUFFIX, Shape.INTEGER_PREFIX):
            return Direction.TO_NUMERAL
        return Direction.TO_INTEGER


# ─── Match Result ───────────────────────────────────────────────────


class MatchResult(BaseModel):
    """A successful classification: which shape, and the raw operand text."""

    model_config = {"frozen": True}

    shape: Shape
    operand: str  # Integer literal or numeral substring, exactly as extracted

    @property
    def direction(self) -> Direction:
        return self.shape.direction


# ─── Registration Metadata ──────────────────────────────────────────


class PluginExample(BaseModel):
    """An example phrase and the result it should produce."""

    input: str
    output: str


class PluginMetadata(BaseModel):
    """Registration data consumed by the host. Opaque to the conversion logic."""

    id: str
    name: str
    version: str
    description: str
    author: str
    source: str
    examples: list[PluginExample] = Field(default_factory=list)
    priority: int = 100
    result_type: str = "string"
