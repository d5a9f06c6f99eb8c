"""Bin -> stake multiplier lookup.

The table is symmetric about the centre bin and never increases from
either edge toward it. Indices outside the table (a different row count)
map to ``FALLBACK_MULTIPLIER`` instead of raising.
"""

from __future__ import annotations

from typing import Mapping

PAYOUT_MULTIPLIERS: tuple[float, ...] = (
    2.0, 1.5, 1.2, 1.0, 0.8, 0.5, 0.3, 0.5, 0.8, 1.0, 1.2, 1.5, 2.0,
)
FALLBACK_MULTIPLIER = 0.3


def payout_multiplier(bin_index: int) -> float:
    if 0 <= bin_index < len(PAYOUT_MULTIPLIERS):
        return PAYOUT_MULTIPLIERS[bin_index]
    return FALLBACK_MULTIPLIER


def payout_table() -> list[float]:
    return list(PAYOUT_MULTIPLIERS)


def expected_multiplier(bin_probabilities: Mapping[int, float]) -> float:
    """Weighted mean multiplier for a distribution of terminal bins.

    Probabilities need not be normalized; they are divided by their sum.
    """
    total = sum(bin_probabilities.values())
    if total <= 0:
        return 0.0
    weighted = sum(payout_multiplier(b) * p for b, p in bin_probabilities.items())
    return weighted / total
