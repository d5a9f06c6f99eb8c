"""Core value types, enums and errors."""

from pegdrop.core.enums import PegMapEncoding
from pegdrop.core.errors import FairnessError, InvalidInput, InvalidSeed
from pegdrop.core.models import (
    GamePath,
    GameResult,
    Peg,
    PegMap,
    PublishedRound,
    SeedCommitment,
    VerificationResult,
)

__all__ = [
    "FairnessError",
    "GamePath",
    "GameResult",
    "InvalidInput",
    "InvalidSeed",
    "Peg",
    "PegMap",
    "PegMapEncoding",
    "PublishedRound",
    "SeedCommitment",
    "VerificationResult",
]
