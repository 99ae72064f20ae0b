"""
Board Analyzer — Best lines and the most informative cell to reveal next.

All frontends call into this module; it is a pure function of a Board.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from board import (
    LINES_THROUGH,
    MAX_REVEALS,
    POSITION_NAMES,
    Board,
    Line,
    position_priority,
)
from ev_engine import line_evs

logger = logging.getLogger(__name__)

# Gains this close to the best are treated as tied (floating-point noise)
CELL_GAIN_EPSILON = 0.01


@dataclass(frozen=True)
class LineRanking:
    """Result of best_lines(): the top line(s), their EV, and every line's EV."""
    best_lines: tuple[Line, ...]
    max_ev: float
    line_evs: tuple[tuple[Line, float], ...] = ()


@dataclass(frozen=True)
class CellSuggestion:
    """Result of best_cells_to_reveal(). max_gain is None when no reveal applies."""
    best_cells: tuple[int, ...]
    max_gain: float | None = None


def _as_board(board):
    """Accept a Board or a raw 9-cell sequence; raw input is validated here."""
    if isinstance(board, Board):
        return board
    return Board(tuple(board))


def best_lines(board) -> LineRanking:
    """Rank the 8 lines by EV.

    Every line whose EV exactly equals the maximum is reported, in Line order.
    On an empty board all 8 lines tie.

    Raises:
        InvalidBoardError: if a raw sequence is passed and fails validation
    """
    board = _as_board(board)
    evs = line_evs(board)
    max_ev = max(ev for _, ev in evs)
    best = tuple(line for line, ev in evs if ev == max_ev)
    logger.debug("best_lines %s -> %s at %.2f", board.cells,
                 [line.value for line in best], max_ev)
    return LineRanking(best_lines=best, max_ev=max_ev, line_evs=evs)


def cell_gains(board) -> dict[int, float]:
    """Gain of revealing each unrevealed position.

    gain(p) = sum of the EVs of the lines through p, minus the best line EV
    available without another reveal.
    """
    board = _as_board(board)
    ranking = best_lines(board)
    evs = dict(ranking.line_evs)
    gains = {}
    for pos in board.unrevealed_positions:
        cell_score = sum(evs[line] for line in LINES_THROUGH[pos])
        gains[pos] = cell_score - ranking.max_ev
    return gains


def best_cells_to_reveal(board, top_only=False) -> CellSuggestion:
    """Suggest which unrevealed cell(s) to reveal next.

    Only applies while fewer than MAX_REVEALS cells are revealed. Positions
    whose gain is within CELL_GAIN_EPSILON of the best are all returned,
    ordered centre first, then corners, then edges (stable within a tier).

    Args:
        board: Board or raw 9-cell sequence
        top_only: Return only the first cell of the ordered tie set

    Returns:
        CellSuggestion with the ordered positions and the best gain
    """
    board = _as_board(board)
    if board.revealed_count >= MAX_REVEALS:
        return CellSuggestion(best_cells=())

    gains = cell_gains(board)
    if not gains:
        return CellSuggestion(best_cells=())

    max_gain = max(gains.values())
    tied = [pos for pos, gain in gains.items() if gain >= max_gain - CELL_GAIN_EPSILON]
    tied.sort(key=position_priority, reverse=True)
    if top_only:
        tied = tied[:1]
    logger.debug("best_cells_to_reveal %s -> %s (gain %.2f)", board.cells, tied, max_gain)
    return CellSuggestion(best_cells=tuple(tied), max_gain=max_gain)


# ── Formatting for frontends ─────────────────────────────────────────────────

def format_best_lines(lines):
    """Comma-joined line names, or 'No valid options' when there are none."""
    if not lines:
        return "No valid options"
    return ", ".join(line.value for line in lines)


def format_cells(positions):
    """Comma-joined position names, or 'None' when there are none."""
    if not positions:
        return "None"
    return ", ".join(POSITION_NAMES[pos] for pos in positions)


def format_ev(ev):
    """Whole-MGP display of an expected value."""
    return f"{ev:.0f} MGP"
