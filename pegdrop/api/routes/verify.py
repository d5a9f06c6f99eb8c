"""GET /api/v1/verify — recompute a revealed round and compare it."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from pegdrop.api.dependencies import get_engine_config
from pegdrop.api.schemas import VerificationResponse
from pegdrop.config import EngineConfig
from pegdrop.core.errors import FairnessError
from pegdrop.core.models import PublishedRound
from pegdrop.engine.verifier import verify_round
from pegdrop.systems.pegmap import coerce_encoding

router = APIRouter()


@router.get("/verify", response_model=VerificationResponse)
def verify(
    server_seed: str = Query(..., description="Revealed server seed"),
    client_seed: str = Query(...),
    nonce: str = Query(...),
    drop_column: int = Query(...),
    commit_hex: str | None = Query(None, description="Published commit to check"),
    combined_seed: str | None = Query(None),
    peg_map_hash: str | None = Query(None),
    bin_index: int | None = Query(None),
    encoding: str | None = Query(None, description="Peg map encoding; defaults to server config"),
    config: EngineConfig = Depends(get_engine_config),
) -> VerificationResponse:
    try:
        resolved = coerce_encoding(encoding or config.peg_map_encoding)
        result = verify_round(
            server_seed,
            client_seed,
            nonce,
            drop_column,
            PublishedRound(
                commit_hex=commit_hex,
                combined_seed=combined_seed,
                peg_map_hash=peg_map_hash,
                bin_index=bin_index,
            ),
            encoding=resolved,
        )
    except FairnessError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return VerificationResponse(
        ok=result.ok,
        mismatches=list(result.mismatches),
        commit_hex=result.commit_hex,
        combined_seed=result.combined_seed,
        peg_map_hash=result.peg_map_hash,
        bin_index=result.bin_index,
        payout_multiplier=result.payout_multiplier,
        encoding=resolved.value,
    )
