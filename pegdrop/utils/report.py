"""Verification report: records batch verification outcomes as JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from pegdrop.core.models import VerificationResult

logger = logging.getLogger(__name__)


class VerificationReport:
    """Accumulates per-round verification results and flushes them to a file."""

    __slots__ = ("_path", "_encoding", "_rounds")

    def __init__(self, path: str | Path, encoding: str) -> None:
        self._path = Path(path)
        self._encoding = encoding
        self._rounds: list[dict[str, Any]] = []

    @property
    def failures(self) -> int:
        return sum(1 for r in self._rounds if not r["ok"])

    def record(self, revealed: Mapping[str, Any], result: VerificationResult) -> None:
        # The server seed is already public once a round is revealed; only
        # the nonce identifies the round in the report.
        self._rounds.append(
            {
                "nonce": revealed["nonce"],
                "drop_column": revealed["drop_column"],
                "ok": result.ok,
                "mismatches": list(result.mismatches),
                "commit_hex": result.commit_hex,
                "combined_seed": result.combined_seed,
                "peg_map_hash": result.peg_map_hash,
                "bin_index": result.bin_index,
                "payout_multiplier": result.payout_multiplier,
            }
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": "1.0",
            "encoding": self._encoding,
            "total_rounds": len(self._rounds),
            "failed_rounds": self.failures,
            "rounds": self._rounds,
        }

    def flush(self) -> None:
        """Write accumulated data to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        logger.info(
            "Verification report saved to %s (%d rounds, %d failed)",
            self._path, len(self._rounds), self.failures,
        )
