"""
Mini Cactpot Board — Line geometry and the immutable board snapshot.

Positions are numbered 0-8 in row-major order:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8

A Board never changes once built; with_cell() returns a new Board. Building
a Board validates it, so any Board that exists is well-formed.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BOARD_SIZE = 9
DIGITS = tuple(range(1, 10))
MAX_REVEALS = 4
UNREVEALED = None


class Line(Enum):
    """The 8 scoring lines, valued by their display names."""
    ROW_1 = "Row 1"
    ROW_2 = "Row 2"
    ROW_3 = "Row 3"
    COLUMN_1 = "Column 1"
    COLUMN_2 = "Column 2"
    COLUMN_3 = "Column 3"
    DIAGONAL_TOP_LEFT = "Diagonal (Top-Left)"
    DIAGONAL_TOP_RIGHT = "Diagonal (Top-Right)"


LINE_POSITIONS = {
    Line.ROW_1: (0, 1, 2),
    Line.ROW_2: (3, 4, 5),
    Line.ROW_3: (6, 7, 8),
    Line.COLUMN_1: (0, 3, 6),
    Line.COLUMN_2: (1, 4, 7),
    Line.COLUMN_3: (2, 5, 8),
    Line.DIAGONAL_TOP_LEFT: (0, 4, 8),
    Line.DIAGONAL_TOP_RIGHT: (2, 4, 6),
}

# Lines passing through each position: 2 for edges, 3 for corners, 4 for the centre
LINES_THROUGH = {
    pos: tuple(line for line in Line if pos in LINE_POSITIONS[line])
    for pos in range(BOARD_SIZE)
}

POSITION_NAMES = (
    "Top-Left", "Top", "Top-Right",
    "Left", "Center", "Right",
    "Bottom-Left", "Bottom", "Bottom-Right",
)

CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)


def position_priority(position):
    """Tie-break rank of a position: the number of lines through it."""
    return len(LINES_THROUGH[position])


def describe_priority(position):
    """Human-readable class of a position: center, corner or edge."""
    if position == CENTER:
        return "center"
    if position in CORNERS:
        return "corner"
    if position in EDGES:
        return "edge"
    raise IndexError(f"Position {position} is off the board")


def line_by_name(name):
    """Look up a Line by its display name. Returns None if unknown."""
    for line in Line:
        if line.value == name:
            return line
    return None


# ── Validation ───────────────────────────────────────────────────────────────

class InvalidBoardError(ValueError):
    """Raised when a board snapshot breaks the 9-cell, distinct 1-9 contract."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("Invalid board: " + "; ".join(self.errors))


def _is_digit(value):
    # bool is an int subclass; True must not pass as 1
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= 9


def validate_cells(cells):
    """Check a candidate board and return a list of error messages.

    An empty list means the cells form a valid board. Positions in the
    messages are 1-based, matching what a player sees on the grid.
    """
    cells = list(cells)
    if len(cells) != BOARD_SIZE:
        return [f"Board must have {BOARD_SIZE} cells, got {len(cells)}"]

    errors = []
    seen = set()
    duplicates = []
    for index, value in enumerate(cells):
        if value is UNREVEALED:
            continue
        if not _is_digit(value):
            errors.append(f"Position {index + 1} has invalid value: {value!r}")
        elif value in seen:
            if value not in duplicates:
                duplicates.append(value)
        else:
            seen.add(value)

    if duplicates:
        errors.append("Duplicate values found: " + ", ".join(str(d) for d in duplicates))
    return errors


# ── Board snapshot ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Board:
    """Immutable 9-cell snapshot. Each cell is None (unrevealed) or a digit 1-9."""
    cells: tuple[int | None, ...]

    def __post_init__(self):
        cells = tuple(self.cells)
        errors = validate_cells(cells)
        if errors:
            raise InvalidBoardError(errors)
        object.__setattr__(self, "cells", cells)

    @classmethod
    def create_empty(cls) -> Board:
        """A board with nothing revealed."""
        return cls((UNREVEALED,) * BOARD_SIZE)

    def __getitem__(self, position):
        return self.cells[position]

    def __iter__(self):
        return iter(self.cells)

    def __len__(self):
        return BOARD_SIZE

    @property
    def revealed_count(self) -> int:
        return sum(1 for v in self.cells if v is not UNREVEALED)

    @property
    def unrevealed_positions(self) -> tuple[int, ...]:
        return tuple(i for i, v in enumerate(self.cells) if v is UNREVEALED)

    @property
    def available_digits(self) -> tuple[int, ...]:
        """Digits 1-9 not revealed anywhere on the board, ascending."""
        taken = set(self.cells)
        return tuple(d for d in DIGITS if d not in taken)

    def line_values(self, line: Line) -> tuple[int | None, ...]:
        """The three cell contents of a line, in the line's position order."""
        return tuple(self.cells[pos] for pos in LINE_POSITIONS[line])

    def with_cell(self, position: int, value: int | None) -> Board:
        """Return a new Board with one cell replaced."""
        if not 0 <= position < BOARD_SIZE:
            raise IndexError(f"Position {position} is off the board")
        cells = list(self.cells)
        cells[position] = value
        return Board(tuple(cells))
