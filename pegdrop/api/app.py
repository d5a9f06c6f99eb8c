"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pegdrop.api.dependencies import set_engine_config
from pegdrop.api.routes import api_router
from pegdrop.config import EngineConfig
from pegdrop.systems.pegmap import coerce_encoding
from pegdrop.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: EngineConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = EngineConfig()

    # Fail at build time rather than on the first request.
    coerce_encoding(config.peg_map_encoding)
    set_engine_config(config)

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        logger.info("API server started (peg map encoding %s).", _config.peg_map_encoding)
        yield
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Peg Drop Fairness Engine",
        description=(
            "Provably-fair peg-drop outcome engine.\n\n"
            "## API Groups\n\n"
            "- **Game** — Run the engine for a combined seed and drop column\n"
            "- **Fairness** — Commit hashing and independent round verification\n"
            "- **Config** — Read-only engine parameters and the payout table\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Game", "description": "Deterministic peg map generation and drop simulation from a combined seed."},
            {"name": "Fairness", "description": "Commit hashes and recomputation of revealed rounds. Stateless: nothing is stored."},
            {"name": "Config", "description": "Board size, hash encoding and payout multipliers."},
        ],
    )

    # CORS: verification is meant to be callable from any origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/healthz", include_in_schema=False)
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app
