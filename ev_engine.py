"""
EV Engine — Exact expected payout of a Mini Cactpot line.

The unrevealed slots of a line are filled by digits drawn without replacement
from the digits not yet seen on the board. Every assignment is equally
likely, so the EV is the plain average of payout() over all of them.

Functions:
    expected_value(line_values, available_digits) — EV of one line
    line_evs(board) — EV of all 8 lines of a board, in Line order
"""
from board import UNREVEALED, Line
from payout_table import payout


def expected_value(line_values, available_digits):
    """Expected payout of a line, averaging over every way to fill its gaps.

    Fills the first unrevealed slot with each available digit in turn,
    recurses with that digit removed, and averages the results. A fully
    revealed line pays payout(sum) and ignores available_digits.

    Args:
        line_values: Three cell values, each a digit 1-9 or None
        available_digits: Digits that may fill the unrevealed slots

    Returns:
        Expected MGP payout as a float

    Raises:
        ValueError: if there are fewer available digits than unrevealed slots
    """
    values = tuple(line_values)
    missing = values.count(UNREVEALED)
    if missing == 0:
        return float(payout(sum(values)))

    digits = tuple(sorted(available_digits))
    if len(digits) < missing:
        raise ValueError(
            f"{missing} unrevealed slots but only {len(digits)} available digits"
        )

    slot = values.index(UNREVEALED)
    total = 0.0
    for i, digit in enumerate(digits):
        filled = values[:slot] + (digit,) + values[slot + 1:]
        total += expected_value(filled, digits[:i] + digits[i + 1:])
    return total / len(digits)


def line_evs(board):
    """EV of every line on the board, as (Line, ev) pairs in Line order."""
    available = board.available_digits
    return tuple(
        (line, expected_value(board.line_values(line), available))
        for line in Line
    )
