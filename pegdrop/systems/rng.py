"""Xorshift32 PRNG seeded from a hex digest.

The generator is the only source of randomness in a game run. Its output
must match other implementations bit for bit, so every operation is done on
an explicit 32-bit word:

    s ^= s << 13   (truncated to 32 bits)
    s ^= s >> 17   (logical shift)
    s ^= s << 5    (truncated to 32 bits)
    return s / 2**32
"""

from __future__ import annotations

import string

from pegdrop.core.errors import InvalidSeed

_HEX_DIGITS = frozenset(string.hexdigits)


class Xorshift32:
    """Stateful 32-bit xorshift generator producing floats in [0.0, 1.0).

    One instance belongs to exactly one game run; draws must be taken in
    order to reproduce a reference stream.
    """

    __slots__ = ("_state", "_draws")

    _MASK = 0xFFFFFFFF
    _SEED_CHARS = 8  # 4 bytes, big-endian

    def __init__(self, seed_hex: str) -> None:
        self._state = self._decode_seed(seed_hex)
        self._draws = 0

    @classmethod
    def _decode_seed(cls, seed_hex: str) -> int:
        if not isinstance(seed_hex, str):
            raise InvalidSeed(f"Seed must be a hex string, got {type(seed_hex).__name__}")
        head = seed_hex[: cls._SEED_CHARS]
        if len(head) < cls._SEED_CHARS:
            raise InvalidSeed(
                f"Seed needs at least {cls._SEED_CHARS} hex characters, got {len(head)}"
            )
        if not _HEX_DIGITS.issuperset(head):
            raise InvalidSeed(f"Seed prefix {head!r} is not hexadecimal")
        state = int.from_bytes(bytes.fromhex(head), "big")
        # Zero is a fixed point of xorshift.
        return state or 1

    @property
    def state(self) -> int:
        return self._state

    @property
    def draws(self) -> int:
        """Number of values drawn since construction."""
        return self._draws

    def next_float(self) -> float:
        """Advance the state and return it scaled to [0.0, 1.0)."""
        s = self._state
        s ^= (s << 13) & self._MASK
        s ^= s >> 17
        s ^= (s << 5) & self._MASK
        self._state = s
        self._draws += 1
        return s / (self._MASK + 1)
