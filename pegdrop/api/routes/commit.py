"""POST /api/v1/commit — hash a server seed and nonce into a commit."""

from __future__ import annotations

from fastapi import APIRouter

from pegdrop.api.schemas import CommitRequest, CommitResponse
from pegdrop.systems.seeds import create_commit

router = APIRouter()


@router.post("/commit", response_model=CommitResponse)
def commit(body: CommitRequest) -> CommitResponse:
    return CommitResponse(commit_hex=create_commit(body.server_seed, body.nonce))
