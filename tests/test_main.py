"""Tests for the command-line entry point."""

from __future__ import annotations

from main import main


class TestMain:
    def test_examples_run_cleanly(self, capsys) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "XLII" in out
        assert "MMXXV" in out

    def test_converts_arguments(self, capsys) -> None:
        assert main(["42 to roman", "XIV"]) == 0
        out = capsys.readouterr().out
        assert "XLII" in out
        assert "14" in out

    def test_error_result_sets_exit_code(self, capsys) -> None:
        assert main(["4000 to roman"]) == 1
        assert "out of range" in capsys.readouterr().out

    def test_unmatched_sets_exit_code(self, capsys) -> None:
        assert main(["hello world"]) == 1
        assert "not a numeral request" in capsys.readouterr().out

    def test_unknown_log_level_does_not_crash(self, capsys, monkeypatch) -> None:
        monkeypatch.setenv("ROMAN_LOG_LEVEL", "verbose")
        assert main(["XIV"]) == 0
        assert "14" in capsys.readouterr().out
