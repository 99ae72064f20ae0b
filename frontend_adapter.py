"""CalculatorAdapter — Shared UI state management for the Mini Cactpot frontends.

Owns the editable grid, input cleaning, the reveal lock, the latest analysis,
and settings persistence. Pure Python — no Textual or other frontend
dependency.

Each frontend (TUI, CLI) creates a CalculatorAdapter and delegates UI-state
logic here, keeping only rendering and input translation frontend-specific.
"""

import logging
import re

from analyzer import best_cells_to_reveal, best_lines
from board import BOARD_SIZE, MAX_REVEALS, POSITION_NAMES, UNREVEALED, Board, InvalidBoardError
from settings import DEFAULTS, load_settings, save_settings

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


def clean_input(value):
    """Turn raw cell input into a digit 1-9 or None.

    Non-digit characters are stripped; an empty result or a number outside
    1-9 clears the cell. Ints are range-checked as-is.
    """
    if value is None:
        return UNREVEALED
    if isinstance(value, bool):
        return UNREVEALED
    if isinstance(value, int):
        return value if 1 <= value <= 9 else UNREVEALED
    cleaned = _NON_DIGITS.sub("", str(value))
    if not cleaned:
        return UNREVEALED
    number = int(cleaned)
    if number < 1 or number > 9:
        return UNREVEALED
    return number


class CalculatorAdapter:
    """Shared UI state for all Mini Cactpot frontends.

    Holds the raw grid the player is editing. The grid may temporarily hold
    a duplicate digit; recalculate() reports that through `errors` instead
    of producing results.
    """

    def __init__(self, settings_path=None):
        self.settings_path = settings_path
        self.cells = [UNREVEALED] * BOARD_SIZE

        # Latest analysis (None until a valid board has been analysed)
        self.ranking = None
        self.suggestion = None
        self.errors = []

        # Settings
        self.show_line_evs = DEFAULTS["show_line_evs"]
        self.single_best_cell = DEFAULTS["single_best_cell"]

        self.recalculate()

    # ── Grid editing ──────────────────────────────────────────────────────

    @property
    def revealed_count(self):
        return sum(1 for v in self.cells if v is not UNREVEALED)

    def is_locked(self, position):
        """Empty cells lock once MAX_REVEALS cells are filled."""
        return self.cells[position] is UNREVEALED and self.revealed_count >= MAX_REVEALS

    def set_cell(self, position, value):
        """Clean and store a value. Returns True if the cell changed.

        Raises:
            IndexError: if position is off the board
        """
        if not 0 <= position < BOARD_SIZE:
            raise IndexError(f"Position {position} is off the board")
        if self.is_locked(position):
            return False
        cleaned = clean_input(value)
        if self.cells[position] == cleaned:
            return False
        self.cells[position] = cleaned
        self.recalculate()
        return True

    def clear_cell(self, position):
        """Clear one cell. Returns True if it held a value."""
        return self.set_cell(position, UNREVEALED)

    def reset(self):
        """Clear the whole grid."""
        self.cells = [UNREVEALED] * BOARD_SIZE
        self.recalculate()

    # ── Analysis ──────────────────────────────────────────────────────────

    def recalculate(self):
        """Re-run the analyzer on the current grid.

        Returns True if the grid was valid and results are available.
        """
        try:
            board = Board(tuple(self.cells))
        except InvalidBoardError as exc:
            logger.warning("Rejected board %s: %s", self.cells, exc)
            self.errors = exc.errors
            self.ranking = None
            self.suggestion = None
            return False
        self.errors = []
        self.ranking = best_lines(board)
        self.suggestion = best_cells_to_reveal(board, top_only=self.single_best_cell)
        return True

    def snapshot(self):
        """JSON-serialisable view of the grid and the latest analysis."""
        data = {
            "cells": list(self.cells),
            "locked": [self.is_locked(i) for i in range(BOARD_SIZE)],
            "revealed_count": self.revealed_count,
            "errors": list(self.errors),
            "best_lines": [],
            "max_ev": None,
            "line_evs": {},
            "best_cells": [],
            "best_cell_names": [],
            "max_gain": None,
            "show_line_evs": self.show_line_evs,
            "single_best_cell": self.single_best_cell,
        }
        if self.ranking is not None:
            data["best_lines"] = [line.value for line in self.ranking.best_lines]
            data["max_ev"] = self.ranking.max_ev
            data["line_evs"] = {line.value: ev for line, ev in self.ranking.line_evs}
        if self.suggestion is not None:
            data["best_cells"] = list(self.suggestion.best_cells)
            data["best_cell_names"] = [POSITION_NAMES[p] for p in self.suggestion.best_cells]
            data["max_gain"] = self.suggestion.max_gain
        return data

    # ── Settings ──────────────────────────────────────────────────────────

    def load_settings(self):
        """Load persisted settings and re-run the analysis with them."""
        settings = load_settings(self.settings_path)
        self.show_line_evs = settings["show_line_evs"]
        self.single_best_cell = settings["single_best_cell"]
        self.recalculate()

    def _save_settings(self):
        """Persist current settings to disk."""
        save_settings({
            "show_line_evs": self.show_line_evs,
            "single_best_cell": self.single_best_cell,
        }, self.settings_path)

    def toggle_line_evs(self):
        """Toggle the per-line EV table and save."""
        self.show_line_evs = not self.show_line_evs
        self._save_settings()

    def toggle_single_best_cell(self):
        """Toggle single-best-cell suggestions, save, and recompute."""
        self.single_best_cell = not self.single_best_cell
        self._save_settings()
        self.recalculate()
