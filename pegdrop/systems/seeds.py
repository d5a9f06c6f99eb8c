"""Commit-reveal seed handling.

Formula:
    commit_hex    = SHA256(server_seed ":" nonce)
    combined_seed = SHA256(server_seed ":" client_seed ":" nonce)

The commit is published before the client seed is collected, binding the
operator to its server seed. Fields are joined with a literal ':' and are not
escaped, so values containing ':' do not concatenate injectively.
"""

from __future__ import annotations

import hashlib
import secrets

from pegdrop.core.models import SeedCommitment

DEFAULT_SERVER_SEED_BYTES = 32
DEFAULT_NONCE_BYTES = 16


def sha256(text: str) -> str:
    """Lowercase hex SHA-256 digest of the UTF-8 encoding of *text*."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def create_commit(server_seed: str, nonce: str) -> str:
    return sha256(f"{server_seed}:{nonce}")


def combine_seed(server_seed: str, client_seed: str, nonce: str) -> str:
    return sha256(f"{server_seed}:{client_seed}:{nonce}")


def generate_server_seed(num_bytes: int = DEFAULT_SERVER_SEED_BYTES) -> str:
    return secrets.token_hex(num_bytes)


def generate_nonce(num_bytes: int = DEFAULT_NONCE_BYTES) -> str:
    return secrets.token_hex(num_bytes)


def new_commitment(
    server_seed_bytes: int = DEFAULT_SERVER_SEED_BYTES,
    nonce_bytes: int = DEFAULT_NONCE_BYTES,
) -> SeedCommitment:
    """Generate a fresh server seed and nonce together with their commit hash."""
    server_seed = generate_server_seed(server_seed_bytes)
    nonce = generate_nonce(nonce_bytes)
    return SeedCommitment(
        server_seed=server_seed,
        nonce=nonce,
        commit_hex=create_commit(server_seed, nonce),
    )
