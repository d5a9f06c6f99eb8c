"""Game runner: one pure call from a combined seed to a full result.

Stream layout of the single PRNG a run owns:

    draws  0..77   peg map (12 rows, 1 + 2 + ... + 12 pegs)
    draws 78..89   drop simulation (one per row)

No state survives the call, so identical inputs always give identical
results, whatever the drop column.
"""

from __future__ import annotations

import logging

from pegdrop.core.enums import PegMapEncoding
from pegdrop.core.models import GameResult
from pegdrop.systems.drop import simulate_drop, validate_drop_column
from pegdrop.systems.pegmap import ROWS, generate_peg_map, peg_map_hash
from pegdrop.systems.rng import Xorshift32

logger = logging.getLogger(__name__)


def run_game(
    combined_seed: str,
    drop_column: int,
    *,
    encoding: PegMapEncoding | str = PegMapEncoding.CANONICAL_V1,
) -> GameResult:
    """Generate the peg map for *combined_seed* and drop a ball at *drop_column*.

    Raises ``InvalidInput`` for a drop column outside [0, 12] and
    ``InvalidSeed`` for a seed whose first 8 characters are not hex.
    """
    validate_drop_column(drop_column, ROWS)
    prng = Xorshift32(combined_seed)

    peg_map = generate_peg_map(prng, ROWS)
    map_hash = peg_map_hash(peg_map, encoding)
    path = simulate_drop(peg_map, drop_column, prng)

    logger.debug(
        "Game run: seed_prefix=%s column=%d bin=%d draws=%d",
        combined_seed[:8], drop_column, path.bin_index, prng.draws,
    )
    return GameResult(
        drop_column=drop_column,
        peg_map=peg_map,
        peg_map_hash=map_hash,
        path=path,
    )
