"""FastAPI dependency injection: provides the EngineConfig singleton."""

from __future__ import annotations

from pegdrop.config import EngineConfig

_config: EngineConfig | None = None


def set_engine_config(config: EngineConfig) -> None:
    global _config
    _config = config


def get_engine_config() -> EngineConfig:
    if _config is None:
        raise RuntimeError("EngineConfig not initialized; server not started correctly.")
    return _config
