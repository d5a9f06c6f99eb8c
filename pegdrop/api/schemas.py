"""Pydantic request and response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Game ---

class GameRequest(BaseModel):
    combined_seed: str = Field(description="Hex digest from combine_seed; first 8 chars seed the PRNG")
    drop_column: int = Field(description="Player-chosen column, 0-12")


class PathSchema(BaseModel):
    decisions: list[bool] = Field(description="One entry per row; true = moved left")
    bin_index: int


class GameResponse(BaseModel):
    drop_column: int
    peg_map: list[list[float]] = Field(description="left_bias per peg, row-major; row r has r+1 pegs")
    peg_map_hash: str
    encoding: str
    path: PathSchema
    payout_multiplier: float


# --- Commit ---

class CommitRequest(BaseModel):
    server_seed: str
    nonce: str


class CommitResponse(BaseModel):
    commit_hex: str


# --- Verify ---

class VerificationResponse(BaseModel):
    ok: bool
    mismatches: list[str] = Field(default_factory=list)
    commit_hex: str
    combined_seed: str
    peg_map_hash: str
    bin_index: int
    payout_multiplier: float
    encoding: str


# --- Payouts / Config ---

class PayoutTableResponse(BaseModel):
    multipliers: list[float]
    fallback: float


class EngineConfigResponse(BaseModel):
    rows: int
    peg_map_encoding: str
    server_seed_bytes: int
    nonce_bytes: int
