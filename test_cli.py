"""Tests for cli.py and cactpot.py — board parsing, reports, exit codes."""

import json

import pytest

import cactpot
from board import InvalidBoardError, Line
from cli import EXIT_INVALID_BOARD, analyse, format_report, main, parse_board

# ── parse_board ──────────────────────────────────────────────────────────────

class TestParseBoard:

    @pytest.mark.parametrize("text", [
        "1,2,,,,,,,",
        "1 2 . . . . . . .",
        "12.......",
        "1,2,0,0,0,0,0,0,0",
        " 12_______ ",
    ])
    def test_formats(self, text):
        assert parse_board(text).cells == (1, 2, None, None, None, None, None, None, None)

    def test_wrong_length(self):
        with pytest.raises(InvalidBoardError) as excinfo:
            parse_board("123")
        assert excinfo.value.errors == ["Board must have 9 cells, got 3"]

    def test_garbage_token(self):
        with pytest.raises(InvalidBoardError) as excinfo:
            parse_board("1,a,,,,,,,")
        assert excinfo.value.errors == ["Position 2 has invalid value: 'a'"]

    def test_out_of_range_is_not_silently_cleared(self):
        with pytest.raises(InvalidBoardError):
            parse_board("12,,,,,,,,")

    def test_duplicate(self):
        with pytest.raises(InvalidBoardError):
            parse_board("11.......")

    @pytest.mark.parametrize("token", ["²", "٣", "５"])
    def test_non_ascii_digit_rejected(self, token):
        """Unicode digits are reported as invalid cells, not passed to int()."""
        with pytest.raises(InvalidBoardError) as excinfo:
            parse_board(token + "........")
        assert excinfo.value.errors == [f"Position 1 has invalid value: {token!r}"]

    def test_dash_is_not_an_unrevealed_marker(self):
        with pytest.raises(InvalidBoardError) as excinfo:
            parse_board("1,-,,,,,,,")
        assert excinfo.value.errors == ["Position 2 has invalid value: '-'"]


# ── Reports ──────────────────────────────────────────────────────────────────

class TestReports:

    def test_analyse_four_revealed(self):
        result = analyse(parse_board("1234....."))
        assert result["best_lines"] == ["Row 1"]
        assert result["max_ev"] == 10000
        assert result["best_cells"] == []
        assert result["max_gain"] is None

    def test_analyse_empty(self):
        result = analyse(parse_board("........."))
        assert result["best_lines"] == [line.value for line in Line]
        assert result["best_cell_names"] == ["Center"]

    def test_text_report(self):
        report = format_report(parse_board("1234....."))
        assert report.splitlines()[:2] == ["Best Options: Row 1", "Expected Value: 10000 MGP"]
        assert "Reveal next" not in report

    def test_text_report_suggests_cell(self):
        report = format_report(parse_board("........."))
        assert "Reveal next: Center" in report

    def test_text_report_all_lines(self):
        report = format_report(parse_board("1234....."), show_all=True)
        assert "* Row 1" in report
        assert "Diagonal (Top-Right)" in report


# ── main ─────────────────────────────────────────────────────────────────────

class TestMain:

    def test_text_output(self, capsys):
        assert main(["--board", "1234....."]) == 0
        assert "Best Options: Row 1" in capsys.readouterr().out

    def test_json_output(self, capsys):
        assert main(["--board", "12.......", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["cells"][:2] == [1, 2]
        assert len(data["line_evs"]) == 8
        assert data["best_cells"]

    def test_top_only(self, capsys):
        assert main(["--board", "12.......", "--json", "--top-only"]) == 0
        assert len(json.loads(capsys.readouterr().out)["best_cells"]) == 1

    def test_invalid_board_exit_status(self, capsys):
        assert main(["--board", "55......."]) == EXIT_INVALID_BOARD
        assert "Duplicate values found: 5" in capsys.readouterr().err

    def test_unicode_digit_exit_status(self, capsys):
        assert main(["--board", "²........"]) == EXIT_INVALID_BOARD
        assert "Position 1 has invalid value" in capsys.readouterr().err

    def test_unified_entry_dispatches_to_cli(self, capsys):
        assert cactpot.main(["--ui", "cli", "--board", "1234....."]) == 0
        assert "Row 1" in capsys.readouterr().out
