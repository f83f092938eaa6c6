"""
Roman Numerals — FastAPI Server
================================

RESTful API for converting between arabic and roman numerals.

Endpoints:
    POST /convert           Classify and convert a free-text request
    POST /match             Classify only ("is this input ours?")
    GET  /examples          Example phrases and their results
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from roman_numerals import __version__
from roman_numerals.config import log_level
from roman_numerals.models import Direction, PluginExample, Shape
from roman_numerals.plugin import RomanNumeralPlugin

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logging.getLogger("roman_numerals").setLevel(log_level())


# ─── Application Lifespan ────────────────────────────────────────────

_plugin: RomanNumeralPlugin | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the plugin instance on startup."""
    global _plugin  # noqa: PLW0603
    _plugin = RomanNumeralPlugin()
    yield
    _plugin = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Roman Numerals API",
    description=(
        "Convert between arabic integers and roman numerals (1–3999). "
        "Accepts free-text requests such as '42 to roman', 'roman 2025', "
        "'XLII to dec' or a bare numeral like 'XIV'."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert and /match endpoints."""

    input: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Free-text conversion request.",
        json_schema_extra={"example": "42 to roman"},
    )


class ConvertResponse(BaseModel):
    """Result of classifying and converting one request."""

    input: str
    matched: bool
    shape: Optional[Shape] = None
    direction: Optional[Direction] = None
    operand: Optional[str] = None
    result: Optional[str] = None
    is_error: bool = False

    model_config = {"json_schema_extra": {"example": {
        "input": "42 to roman",
        "matched": True,
        "shape": "INTEGER_SUFFIX",
        "direction": "TO_NUMERAL",
        "operand": "42",
        "result": "XLII",
        "is_error": False,
    }}}


class MatchResponse(BaseModel):
    input: str
    matched: bool
    shape: Optional[Shape] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    plugin_id: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_plugin() -> RomanNumeralPlugin:
    if _plugin is None:
        raise HTTPException(status_code=503, detail="Plugin not initialised")
    return _plugin


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a free-text numeral request",
    tags=["Conversion"],
    responses={503: {"description": "Plugin not yet initialised"}},
)
def convert(request: ConvertRequest) -> ConvertResponse:
    """Classify the input and run the conversion it asks for.

    - **matched**: `false` if the input is not a numeral request (result is null)
    - **result**: the numeral, the decimal value, or an `Error: ...` message
    - **is_error**: `true` for out-of-range integers and malformed numerals
    """
    plugin = _get_plugin()
    found = plugin.classify(request.input)
    if found is None:
        return ConvertResponse(input=request.input, matched=False)

    result = plugin.convert(found)
    return ConvertResponse(
        input=request.input,
        matched=True,
        shape=found.shape,
        direction=found.direction,
        operand=found.operand,
        result=result,
        is_error=result is None or result.startswith("Error:"),
    )


@app.post(
    "/match",
    summary="Check whether an input is a numeral request",
    tags=["Conversion"],
    responses={503: {"description": "Plugin not yet initialised"}},
)
def match(request: ConvertRequest) -> MatchResponse:
    """Classify only; no conversion is performed."""
    found = _get_plugin().classify(request.input)
    return MatchResponse(
        input=request.input,
        matched=found is not None,
        shape=found.shape if found else None,
    )


@app.get(
    "/examples",
    summary="Example requests",
    tags=["System"],
    responses={503: {"description": "Plugin not yet initialised"}},
)
def examples() -> list[PluginExample]:
    return _get_plugin().examples()


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Plugin not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and plugin info."""
    plugin = _get_plugin()
    return HealthResponse(
        status="healthy",
        version=__version__,
        plugin_id=plugin.metadata.id,
    )
