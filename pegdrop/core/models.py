"""Value types shared by the engine, the verifier and the API.

All models are frozen pydantic dataclasses: the engine treats them as
immutable values, and the API serializes them directly through a
``TypeAdapter`` without a parallel schema hierarchy.

Key types:
  Peg               — one obstacle and its left-bias weight
  PegMap            — triangular grid of pegs (row r holds r+1 pegs)
  GamePath          — left/right decisions and the terminal bin
  GameResult        — everything one game run produces
  SeedCommitment    — fresh secret material plus its published commit
  PublishedRound    — values an operator published for a round
  VerificationResult— values recomputed from revealed inputs
"""

from __future__ import annotations

from typing import Iterator

from pydantic.dataclasses import dataclass as pydantic_dataclass


@pydantic_dataclass(frozen=True)
class Peg:
    """Single peg; ``left_bias`` is the probability weight toward a left bounce."""

    left_bias: float


@pydantic_dataclass(frozen=True)
class PegMap:
    """Triangular peg layout, indexable as ``peg_map[row][col]``."""

    rows: tuple[tuple[Peg, ...], ...]

    def __getitem__(self, row: int) -> tuple[Peg, ...]:
        return self.rows[row]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[tuple[Peg, ...]]:
        return iter(self.rows)

    @property
    def peg_count(self) -> int:
        return sum(len(row) for row in self.rows)

    def biases(self) -> list[list[float]]:
        """Return the bias values as nested lists (row-major)."""
        return [[peg.left_bias for peg in row] for row in self.rows]


@pydantic_dataclass(frozen=True)
class GamePath:
    """Decision sequence (True = moved left) and the resulting bin."""

    decisions: tuple[bool, ...]
    bin_index: int

    @property
    def right_moves(self) -> int:
        return sum(1 for d in self.decisions if not d)


@pydantic_dataclass(frozen=True)
class GameResult:
    drop_column: int
    peg_map: PegMap
    peg_map_hash: str
    path: GamePath


@pydantic_dataclass(frozen=True)
class SeedCommitment:
    """Secret seed material and the hash published before play."""

    server_seed: str
    nonce: str
    commit_hex: str


@pydantic_dataclass(frozen=True)
class PublishedRound:
    """Values previously published or stored for a round.

    Every field is optional; verification only compares the ones present.
    """

    commit_hex: str | None = None
    combined_seed: str | None = None
    peg_map_hash: str | None = None
    bin_index: int | None = None


@pydantic_dataclass(frozen=True)
class VerificationResult:
    """Values recomputed from a round's revealed inputs."""

    commit_hex: str
    combined_seed: str
    peg_map_hash: str
    bin_index: int
    payout_multiplier: float
    mismatches: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.mismatches
