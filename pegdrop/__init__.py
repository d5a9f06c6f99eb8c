"""Provably-fair peg drop engine: commit-reveal seeds, xorshift32 peg maps, drop simulation."""

__version__ = "0.1.0"
