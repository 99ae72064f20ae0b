"""
Payout Table — MGP reward for the sum of a chosen Mini Cactpot line.

Three distinct digits 1-9 always sum to 6..24, but payout() is total over
the integers: anything outside the table pays 0.
"""

PAYOUTS = {
    6: 10000,
    7: 36,
    8: 720,
    9: 360,
    10: 80,
    11: 252,
    12: 108,
    13: 72,
    14: 54,
    15: 180,
    16: 72,
    17: 180,
    18: 119,
    19: 36,
    20: 306,
    21: 1080,
    22: 144,
    23: 1800,
    24: 3600,
}


def payout(total):
    """Return the MGP reward for a line summing to total (0 if off the table)."""
    return PAYOUTS.get(total, 0)
