"""Engine systems: PRNG, seed combination, peg map, drop simulation, payouts."""

from pegdrop.systems.drop import simulate_drop
from pegdrop.systems.payout import payout_multiplier
from pegdrop.systems.pegmap import generate_peg_map, peg_map_hash
from pegdrop.systems.rng import Xorshift32
from pegdrop.systems.seeds import combine_seed, create_commit, sha256

__all__ = [
    "Xorshift32",
    "combine_seed",
    "create_commit",
    "generate_peg_map",
    "payout_multiplier",
    "peg_map_hash",
    "sha256",
    "simulate_drop",
]
