"""Ball-drop simulation over a generated peg map.

The drop column applies one horizontal shift to every peg's bias:

    adj = (drop_column - rows // 2) * 0.01

At each row the ball hits the peg under its current horizontal offset
(the number of right moves so far, never more than the row index), draws
once, and goes left when the draw is below the shifted bias. The terminal
bin is the number of right moves.
"""

from __future__ import annotations

from pegdrop.core.errors import InvalidInput
from pegdrop.core.models import GamePath, PegMap
from pegdrop.systems.rng import Xorshift32

COLUMN_SHIFT = 0.01


def validate_drop_column(drop_column: int, rows: int) -> int:
    """Return *drop_column* unchanged or raise ``InvalidInput``; never clamps."""
    if isinstance(drop_column, bool) or not isinstance(drop_column, int):
        raise InvalidInput(f"drop_column must be an integer, got {drop_column!r}")
    if not 0 <= drop_column <= rows:
        raise InvalidInput(f"drop_column must be in [0, {rows}], got {drop_column}")
    return drop_column


def simulate_drop(peg_map: PegMap, drop_column: int, prng: Xorshift32) -> GamePath:
    """Walk the ball through every row, consuming one draw per row."""
    rows = len(peg_map)
    validate_drop_column(drop_column, rows)
    adj = (drop_column - rows // 2) * COLUMN_SHIFT

    right_moves = 0
    decisions: list[bool] = []
    for row in range(rows):
        peg = peg_map[row][min(right_moves, row)]
        adjusted_bias = max(0.0, min(1.0, peg.left_bias + adj))
        go_left = prng.next_float() < adjusted_bias
        decisions.append(go_left)
        if not go_left:
            right_moves += 1

    return GamePath(decisions=tuple(decisions), bin_index=right_moves)
