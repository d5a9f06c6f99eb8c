"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, unique


@unique
class PegMapEncoding(str, Enum):
    """Textual forms a peg map can be serialized to before hashing."""

    CANONICAL_V1 = "v1"          # fixed 6-decimal rows, ';' / ',' separated
    LEGACY_JSON = "legacy-json"  # compact JSON object keyed by row index
