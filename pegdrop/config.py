"""Engine configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration for the engine and its service wrappers."""

    # Hashing
    peg_map_encoding: str = "v1"        # "v1" or "legacy-json"

    # Secret material generated by `commit`
    server_seed_bytes: int = 32
    nonce_bytes: int = 16

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging / output
    log_level: str = "INFO"
    report_file: str = "verification_report.json"
