"""GET /api/v1/config and /api/v1/payouts — read-only engine parameters."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from pegdrop.api.dependencies import get_engine_config
from pegdrop.api.schemas import EngineConfigResponse, PayoutTableResponse
from pegdrop.config import EngineConfig
from pegdrop.systems.payout import FALLBACK_MULTIPLIER, payout_table
from pegdrop.systems.pegmap import ROWS

router = APIRouter()


@router.get("/config", response_model=EngineConfigResponse)
def get_config(
    config: EngineConfig = Depends(get_engine_config),
) -> EngineConfigResponse:
    return EngineConfigResponse(
        rows=ROWS,
        peg_map_encoding=config.peg_map_encoding,
        server_seed_bytes=config.server_seed_bytes,
        nonce_bytes=config.nonce_bytes,
    )


@router.get("/payouts", response_model=PayoutTableResponse)
def get_payouts() -> PayoutTableResponse:
    return PayoutTableResponse(multipliers=payout_table(), fallback=FALLBACK_MULTIPLIER)
