"""Exceptions raised by the fairness engine for structurally invalid input."""

from __future__ import annotations


class FairnessError(ValueError):
    """Base class for every input error raised by the engine."""


class InvalidSeed(FairnessError):
    """A seed string cannot be decoded into a PRNG state."""


class InvalidInput(FairnessError):
    """A caller-supplied value is outside its allowed domain."""
