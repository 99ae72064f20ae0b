"""
Board Test Suite

Covers:
    1. Line geometry — positions, names, lines through each cell
    2. Validation — length, range, type, duplicates
    3. Board snapshot — derived values and immutability
"""
import pytest

from board import (
    BOARD_SIZE,
    CENTER,
    CORNERS,
    EDGES,
    LINE_POSITIONS,
    LINES_THROUGH,
    Board,
    InvalidBoardError,
    Line,
    describe_priority,
    line_by_name,
    position_priority,
    validate_cells,
)

# ═══════════════════════════════════════════════════════════════════════════════
# 1. LINE GEOMETRY
# ═══════════════════════════════════════════════════════════════════════════════

class TestLineGeometry:

    def test_eight_lines(self):
        assert len(Line) == 8
        assert set(LINE_POSITIONS) == set(Line)

    def test_line_positions(self):
        assert LINE_POSITIONS[Line.ROW_1] == (0, 1, 2)
        assert LINE_POSITIONS[Line.ROW_3] == (6, 7, 8)
        assert LINE_POSITIONS[Line.COLUMN_2] == (1, 4, 7)
        assert LINE_POSITIONS[Line.DIAGONAL_TOP_LEFT] == (0, 4, 8)
        assert LINE_POSITIONS[Line.DIAGONAL_TOP_RIGHT] == (2, 4, 6)

    def test_display_names_in_order(self):
        assert [line.value for line in Line] == [
            "Row 1", "Row 2", "Row 3",
            "Column 1", "Column 2", "Column 3",
            "Diagonal (Top-Left)", "Diagonal (Top-Right)",
        ]

    def test_lines_through_counts(self):
        assert len(LINES_THROUGH[CENTER]) == 4
        for pos in CORNERS:
            assert len(LINES_THROUGH[pos]) == 3
        for pos in EDGES:
            assert len(LINES_THROUGH[pos]) == 2

    def test_lines_through_consistent_with_positions(self):
        for pos, lines in LINES_THROUGH.items():
            for line in lines:
                assert pos in LINE_POSITIONS[line]

    def test_priority_order(self):
        assert position_priority(CENTER) > position_priority(0) > position_priority(1)

    def test_describe_priority(self):
        assert describe_priority(4) == "center"
        assert describe_priority(6) == "corner"
        assert describe_priority(5) == "edge"

    def test_describe_priority_covers_every_position(self):
        assert [describe_priority(p) for p in range(9)].count("edge") == len(EDGES)
        with pytest.raises(IndexError):
            describe_priority(9)

    def test_line_by_name(self):
        assert line_by_name("Column 3") == Line.COLUMN_3
        assert line_by_name("Row 9") is None


# ═══════════════════════════════════════════════════════════════════════════════
# 2. VALIDATION
# ═══════════════════════════════════════════════════════════════════════════════

class TestValidation:

    def test_valid_board_has_no_errors(self):
        assert validate_cells([1, None, 3, None, None, None, None, None, 9]) == []

    def test_wrong_length(self):
        errors = validate_cells([1, 2, 3])
        assert errors == ["Board must have 9 cells, got 3"]

    def test_out_of_range(self):
        errors = validate_cells([12, None, None, None, None, None, None, None, None])
        assert errors == ["Position 1 has invalid value: 12"]

    def test_zero_is_invalid(self):
        assert validate_cells([None] * 8 + [0]) == ["Position 9 has invalid value: 0"]

    def test_bool_is_invalid(self):
        assert len(validate_cells([True] + [None] * 8)) == 1

    def test_string_is_invalid(self):
        assert len(validate_cells(["5"] + [None] * 8)) == 1

    def test_duplicates_reported_once(self):
        errors = validate_cells([4, 4, 4, 7, 7, None, None, None, None])
        assert errors == ["Duplicate values found: 4, 7"]

    def test_board_raises_with_errors(self):
        with pytest.raises(InvalidBoardError) as excinfo:
            Board((1, 1, None, None, None, None, None, None, None))
        assert excinfo.value.errors == ["Duplicate values found: 1"]
        assert isinstance(excinfo.value, ValueError)


# ═══════════════════════════════════════════════════════════════════════════════
# 3. BOARD SNAPSHOT
# ═══════════════════════════════════════════════════════════════════════════════

class TestBoard:

    def test_empty_board(self):
        board = Board.create_empty()
        assert len(board) == BOARD_SIZE
        assert board.revealed_count == 0
        assert board.available_digits == tuple(range(1, 10))
        assert board.unrevealed_positions == tuple(range(9))

    def test_accepts_list(self):
        board = Board([1, 2, None, None, None, None, None, None, None])
        assert board.cells == (1, 2, None, None, None, None, None, None, None)

    def test_available_digits_exclude_revealed(self):
        board = Board((5, None, None, None, 1, None, None, None, 9))
        assert board.available_digits == (2, 3, 4, 6, 7, 8)
        assert board.revealed_count == 3

    def test_line_values(self):
        board = Board((1, 2, 3, 4, None, None, None, None, None))
        assert board.line_values(Line.ROW_1) == (1, 2, 3)
        assert board.line_values(Line.COLUMN_1) == (1, 4, None)
        assert board.line_values(Line.DIAGONAL_TOP_RIGHT) == (3, None, None)

    def test_with_cell_returns_new_board(self):
        board = Board.create_empty()
        updated = board.with_cell(4, 7)
        assert board[4] is None
        assert updated[4] == 7
        assert updated is not board

    def test_with_cell_validates(self):
        board = Board.create_empty().with_cell(0, 3)
        with pytest.raises(InvalidBoardError):
            board.with_cell(1, 3)

    def test_with_cell_off_board(self):
        with pytest.raises(IndexError):
            Board.create_empty().with_cell(9, 1)

    def test_frozen(self):
        board = Board.create_empty()
        with pytest.raises(AttributeError):
            board.cells = (1,) * 9
