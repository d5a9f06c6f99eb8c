"""Independent round verification from revealed inputs.

Anyone holding a round's server seed, client seed, nonce and drop column
can recompute every published value; no access to the operator's storage
is needed. A published commit that does not match the revealed server
seed means the operator changed the seed after committing.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, Mapping

from pydantic import ValidationError

from pegdrop.core.enums import PegMapEncoding
from pegdrop.core.errors import InvalidInput
from pegdrop.core.models import PublishedRound, VerificationResult
from pegdrop.engine.game import run_game
from pegdrop.systems.payout import payout_multiplier
from pegdrop.systems.seeds import combine_seed, create_commit

logger = logging.getLogger(__name__)

_HEX_FIELDS = ("commit_hex", "combined_seed", "peg_map_hash")


def _compare(recomputed: VerificationResult, published: PublishedRound) -> tuple[str, ...]:
    mismatches: list[str] = []
    for name in _HEX_FIELDS:
        expected = getattr(published, name)
        if expected is not None and expected.lower() != getattr(recomputed, name):
            mismatches.append(name)
    if published.bin_index is not None and published.bin_index != recomputed.bin_index:
        mismatches.append("bin_index")
    return tuple(mismatches)


def verify_round(
    server_seed: str,
    client_seed: str,
    nonce: str,
    drop_column: int,
    published: PublishedRound | None = None,
    *,
    encoding: PegMapEncoding | str = PegMapEncoding.CANONICAL_V1,
) -> VerificationResult:
    """Recompute a round and compare it against *published* values, if given."""
    combined = combine_seed(server_seed, client_seed, nonce)
    game = run_game(combined, drop_column, encoding=encoding)
    result = VerificationResult(
        commit_hex=create_commit(server_seed, nonce),
        combined_seed=combined,
        peg_map_hash=game.peg_map_hash,
        bin_index=game.path.bin_index,
        payout_multiplier=payout_multiplier(game.path.bin_index),
    )
    if published is None:
        return result

    mismatches = _compare(result, published)
    if mismatches:
        logger.warning(
            "Round with nonce %s failed verification: %s", nonce, ", ".join(mismatches),
        )
        return dataclasses.replace(result, mismatches=mismatches)
    logger.debug("Round with nonce %s verified", nonce)
    return result


_SEED_KEYS = ("server_seed", "client_seed", "nonce")
_REQUIRED_KEYS = (*_SEED_KEYS, "drop_column")


def verify_batch(
    records: Iterable[Mapping[str, object]],
    *,
    encoding: PegMapEncoding | str = PegMapEncoding.CANONICAL_V1,
) -> list[VerificationResult]:
    """Verify revealed rounds given as mappings, preserving input order.

    Each record needs ``server_seed``, ``client_seed``, ``nonce`` and
    ``drop_column``; any of ``commit_hex``, ``combined_seed``,
    ``peg_map_hash`` and ``bin_index`` present are compared.
    """
    results: list[VerificationResult] = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise InvalidInput(f"Record {index} is not an object")
        missing = [k for k in _REQUIRED_KEYS if k not in record]
        if missing:
            raise InvalidInput(f"Record {index} is missing {', '.join(missing)}")
        # combine_seed would happily hash "None" or "42"
        not_text = [k for k in _SEED_KEYS if not isinstance(record[k], str)]
        if not_text:
            raise InvalidInput(f"Record {index} has non-string {', '.join(not_text)}")
        try:
            published = PublishedRound(
                commit_hex=record.get("commit_hex"),
                combined_seed=record.get("combined_seed"),
                peg_map_hash=record.get("peg_map_hash"),
                bin_index=record.get("bin_index"),
            )
        except ValidationError as exc:
            raise InvalidInput(f"Record {index} has malformed published values: {exc}") from exc
        results.append(
            verify_round(
                record["server_seed"],
                record["client_seed"],
                record["nonce"],
                record["drop_column"],
                published,
                encoding=encoding,
            )
        )
    return results
