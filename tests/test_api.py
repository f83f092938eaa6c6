"""
FastAPI endpoint tests for the Roman Numerals API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from roman_numerals.plugin import RomanNumeralPlugin

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_plugin() -> None:
    """Initialise the plugin once for all API tests (bypasses lifespan)."""
    api._plugin = RomanNumeralPlugin()
    yield  # type: ignore[misc]
    api._plugin = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["plugin_id"] == "community:roman-numerals"

    def test_health_503_without_plugin(self) -> None:
        api._plugin = None
        try:
            assert client.get("/health").status_code == 503
        finally:
            api._plugin = RomanNumeralPlugin()


class TestConvertEndpoint:
    def test_integer_to_numeral(self) -> None:
        resp = client.post("/convert", json={"input": "42 to roman"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["matched"] is True
        assert data["shape"] == "INTEGER_SUFFIX"
        assert data["direction"] == "TO_NUMERAL"
        assert data["operand"] == "42"
        assert data["result"] == "XLII"
        assert data["is_error"] is False

    def test_prefix_form(self) -> None:
        data = client.post("/convert", json={"input": "roman 2025"}).json()
        assert data["result"] == "MMXXV"

    def test_numeral_to_decimal(self) -> None:
        data = client.post("/convert", json={"input": "XLII to dec"}).json()
        assert data["direction"] == "TO_INTEGER"
        assert data["result"] == "42"

    def test_bare_numeral(self) -> None:
        data = client.post("/convert", json={"input": "XIV"}).json()
        assert data["shape"] == "BARE_NUMERAL"
        assert data["result"] == "14"

    def test_out_of_range_is_error_text(self) -> None:
        resp = client.post("/convert", json={"input": "4000 to roman"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_error"] is True
        assert "4000" in data["result"]
        assert "1–3999" in data["result"]

    def test_invalid_numeral_is_error_text(self) -> None:
        data = client.post("/convert", json={"input": "IIII to dec"}).json()
        assert data["is_error"] is True
        assert data["result"] == 'Error: invalid roman numeral "IIII"'

    def test_unmatched_input(self) -> None:
        resp = client.post("/convert", json={"input": "hello world"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["matched"] is False
        assert data["result"] is None
        assert data["shape"] is None


class TestMatchEndpoint:
    def test_matched(self) -> None:
        data = client.post("/match", json={"input": "xlii to dec"}).json()
        assert data == {"input": "xlii to dec", "matched": True, "shape": "NUMERAL_TO_INTEGER"}

    def test_not_matched(self) -> None:
        data = client.post("/match", json={"input": "hello world"}).json()
        assert data["matched"] is False
        assert data["shape"] is None

    def test_nbsp_separated_input_matches(self) -> None:
        data = client.post("/match", json={"input": "42\u00a0to roman"}).json()
        assert data["matched"] is True
        assert data["shape"] == "INTEGER_SUFFIX"

    def test_503_without_plugin(self) -> None:
        api._plugin = None
        try:
            assert client.post("/match", json={"input": "XIV"}).status_code == 503
        finally:
            api._plugin = RomanNumeralPlugin()


class TestExamplesEndpoint:
    def test_lists_examples(self) -> None:
        data = client.get("/examples").json()
        assert {"input": "42 to roman", "output": "XLII"} in data
        assert len(data) == 4


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/convert", json={})
        assert resp.status_code == 422

    def test_empty_input_returns_422(self) -> None:
        resp = client.post("/convert", json={"input": ""})
        assert resp.status_code == 422

    def test_too_long_input_returns_422(self) -> None:
        resp = client.post("/convert", json={"input": "I" * 257})
        assert resp.status_code == 422

    def test_missing_content_type_returns_422(self) -> None:
        resp = client.post("/convert")
        assert resp.status_code == 422
