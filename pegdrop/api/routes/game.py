"""POST /api/v1/game — run the engine for a combined seed and drop column."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pegdrop.api.dependencies import get_engine_config
from pegdrop.api.schemas import GameRequest, GameResponse, PathSchema
from pegdrop.config import EngineConfig
from pegdrop.core.errors import FairnessError
from pegdrop.engine.game import run_game
from pegdrop.systems.payout import payout_multiplier

router = APIRouter()


@router.post("/game", response_model=GameResponse)
def play_game(
    body: GameRequest,
    config: EngineConfig = Depends(get_engine_config),
) -> GameResponse:
    try:
        result = run_game(body.combined_seed, body.drop_column, encoding=config.peg_map_encoding)
    except FairnessError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return GameResponse(
        drop_column=result.drop_column,
        peg_map=result.peg_map.biases(),
        peg_map_hash=result.peg_map_hash,
        encoding=config.peg_map_encoding,
        path=PathSchema(
            decisions=list(result.path.decisions),
            bin_index=result.path.bin_index,
        ),
        payout_multiplier=payout_multiplier(result.path.bin_index),
    )
