#!/usr/bin/env python3
"""
Mini Cactpot CLI — Analyse one board from the command line.

Usage:
    python cli.py --board "1,2,,,,,,,"        # commas, empty = unrevealed
    python cli.py --board "1 2 . . . . . . ."  # whitespace, . = unrevealed
    python cli.py --board 12.......            # nine characters
    python cli.py --board 1234..... --all      # also print every line's EV
    python cli.py --board 12....... --json     # machine-readable output
"""
import argparse
import json
import logging
import sys

from analyzer import best_cells_to_reveal, best_lines, format_best_lines, format_cells, format_ev
from board import BOARD_SIZE, MAX_REVEALS, POSITION_NAMES, UNREVEALED, Board, InvalidBoardError

logger = logging.getLogger(__name__)

UNREVEALED_TOKENS = {"", ".", "_", "?", "0", "x", "X"}

EXIT_INVALID_BOARD = 2


def parse_board(text):
    """Parse a board string into a Board.

    Cells may be separated by commas or whitespace, or given as exactly nine
    characters with no separators.

    Raises:
        InvalidBoardError: on unparseable cells or an invalid board
    """
    text = text.strip()
    if "," in text:
        tokens = [t.strip() for t in text.split(",")]
    elif any(ch.isspace() for ch in text):
        tokens = text.split()
    else:
        tokens = list(text)

    cells = []
    errors = []
    for index, token in enumerate(tokens):
        if token in UNREVEALED_TOKENS:
            cells.append(UNREVEALED)
        elif token.isascii() and token.isdecimal():
            cells.append(int(token))
        else:
            errors.append(f"Position {index + 1} has invalid value: {token!r}")
            cells.append(UNREVEALED)
    if errors:
        raise InvalidBoardError(errors)
    return Board(tuple(cells))


def analyse(board, top_only=False):
    """Run both analyses and collect a JSON-serialisable result."""
    ranking = best_lines(board)
    suggestion = best_cells_to_reveal(board, top_only=top_only)
    return {
        "cells": list(board.cells),
        "revealed_count": board.revealed_count,
        "best_lines": [line.value for line in ranking.best_lines],
        "max_ev": ranking.max_ev,
        "line_evs": {line.value: ev for line, ev in ranking.line_evs},
        "best_cells": list(suggestion.best_cells),
        "best_cell_names": [POSITION_NAMES[p] for p in suggestion.best_cells],
        "max_gain": suggestion.max_gain,
    }


def format_report(board, top_only=False, show_all=False):
    """Human-readable report for one board."""
    ranking = best_lines(board)
    lines = [
        f"Best Options: {format_best_lines(ranking.best_lines)}",
        f"Expected Value: {format_ev(ranking.max_ev)}",
    ]
    if board.revealed_count < MAX_REVEALS:
        suggestion = best_cells_to_reveal(board, top_only=top_only)
        lines.append(f"Reveal next: {format_cells(suggestion.best_cells)}")
    if show_all:
        lines.append("")
        for line, ev in ranking.line_evs:
            marker = "*" if line in ranking.best_lines else " "
            lines.append(f"{marker} {line.value:<22}{ev:>9.1f}")
    return "\n".join(lines)


def parse_args(argv=None):
    """Parse command-line arguments.

    Args:
        argv: Optional list of args (for testing). None uses sys.argv.
    """
    parser = argparse.ArgumentParser(description="Mini Cactpot expected-value calculator")
    parser.add_argument("--board", required=True,
                        help=f"{BOARD_SIZE} cells in row-major order; blank, '.', '_' or 0 = unrevealed")
    parser.add_argument("--all", action="store_true", dest="show_all",
                        help="Print the EV of every line")
    parser.add_argument("--top-only", action="store_true",
                        help="Suggest a single cell instead of the full tied set")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Entry point for the CLI. Returns the process exit status."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        board = parse_board(args.board)
    except InvalidBoardError as exc:
        logger.debug("Board rejected: %s", args.board)
        for error in exc.errors:
            print(error, file=sys.stderr)
        return EXIT_INVALID_BOARD

    if args.json:
        print(json.dumps(analyse(board, top_only=args.top_only), indent=2))
    else:
        print(format_report(board, top_only=args.top_only, show_all=args.show_all))
    return 0


if __name__ == "__main__":
    sys.exit(main())
