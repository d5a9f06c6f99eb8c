"""Peg map generation and canonical hashing.

Each peg consumes one PRNG draw, row by row and left to right:

    left_bias = 0.5 + (r - 0.5) * 0.2      # [0,1) -> [0.4,0.6)
    stored    = floor(left_bias * 1e6 + 0.5) / 1e6

A 12-row map therefore consumes 78 draws (1 + 2 + ... + 12).

The hash of a map is taken over an explicit text encoding rather than a
generic serializer, so independent implementations produce byte-identical
input to the digest.
"""

from __future__ import annotations

import json
import math

from pegdrop.core.enums import PegMapEncoding
from pegdrop.core.errors import InvalidInput
from pegdrop.core.models import Peg, PegMap
from pegdrop.systems.rng import Xorshift32
from pegdrop.systems.seeds import sha256

ROWS = 12
BIAS_CENTER = 0.5
BIAS_SPREAD = 0.2
BIAS_DECIMALS = 6

_BIAS_SCALE = 10**BIAS_DECIMALS


def round_bias(value: float) -> float:
    """Round half up to 6 decimals on the scaled double.

    Matches ``Math.round(value * 1e6) / 1e6`` for the positive magnitudes
    a bias can take; Python's ``round()`` (half-to-even on the exact
    decimal value) does not.
    """
    return math.floor(value * _BIAS_SCALE + 0.5) / _BIAS_SCALE


def generate_peg_map(prng: Xorshift32, rows: int = ROWS) -> PegMap:
    """Draw one bias per peg for a triangular map of *rows* rows."""
    layout: list[tuple[Peg, ...]] = []
    for row in range(rows):
        pegs: list[Peg] = []
        for _col in range(row + 1):
            r = prng.next_float()
            left_bias = BIAS_CENTER + (r - 0.5) * BIAS_SPREAD
            pegs.append(Peg(left_bias=round_bias(left_bias)))
        layout.append(tuple(pegs))
    return PegMap(rows=tuple(layout))


def coerce_encoding(encoding: PegMapEncoding | str) -> PegMapEncoding:
    try:
        return PegMapEncoding(encoding)
    except ValueError:
        raise InvalidInput(f"Unknown peg map encoding {encoding!r}") from None


def _encode_v1(peg_map: PegMap) -> str:
    rows = (",".join(f"{peg.left_bias:.{BIAS_DECIMALS}f}" for peg in row) for row in peg_map)
    return ";".join(["v1", *rows])


def _encode_legacy_json(peg_map: PegMap) -> str:
    # Row keys are stringified integers in ascending order; float repr is the
    # shortest round-trip form, which is what JSON.stringify emits too.
    payload = {
        str(index): [{"leftBias": peg.left_bias} for peg in row]
        for index, row in enumerate(peg_map)
    }
    return json.dumps(payload, separators=(",", ":"))


def encode_peg_map(
    peg_map: PegMap,
    encoding: PegMapEncoding | str = PegMapEncoding.CANONICAL_V1,
) -> str:
    """Serialize *peg_map* to the text that gets hashed."""
    match coerce_encoding(encoding):
        case PegMapEncoding.CANONICAL_V1:
            return _encode_v1(peg_map)
        case PegMapEncoding.LEGACY_JSON:
            return _encode_legacy_json(peg_map)


def peg_map_hash(
    peg_map: PegMap,
    encoding: PegMapEncoding | str = PegMapEncoding.CANONICAL_V1,
) -> str:
    return sha256(encode_peg_map(peg_map, encoding))
