"""Engine layer: game runner and round verification."""

from pegdrop.engine.game import run_game
from pegdrop.engine.verifier import verify_batch, verify_round

__all__ = ["run_game", "verify_batch", "verify_round"]
