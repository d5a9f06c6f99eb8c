"""Entry point: ``python -m pegdrop``.

Subcommands:
  - ``python -m pegdrop``               → Launch the FastAPI server
  - ``python -m pegdrop commit``        → Generate a server seed, nonce and commit
  - ``python -m pegdrop play ...``      → Run one game from revealed inputs
  - ``python -m pegdrop verify ...``    → Verify one revealed round
  - ``python -m pegdrop verify-batch F``→ Verify a JSON file of revealed rounds
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from pegdrop.config import EngineConfig
from pegdrop.core.errors import FairnessError, InvalidInput

logger = logging.getLogger(__name__)

_DEFAULTS = EngineConfig()
_LOG_LEVELS = ["DEBUG", "INFO", "WARNING"]
_ENCODINGS = ["v1", "legacy-json"]


def _add_round_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--server-seed", type=str, required=True)
    parser.add_argument("--client-seed", type=str, required=True)
    parser.add_argument("--nonce", type=str, required=True)
    parser.add_argument("--drop-column", type=int, default=6)
    parser.add_argument("--encoding", type=str, default="v1", choices=_ENCODINGS)
    parser.add_argument("--log-level", type=str, default="WARNING", choices=_LOG_LEVELS)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Provably-fair peg drop engine")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default=_DEFAULTS.host)
    srv.add_argument("--port", type=int, default=_DEFAULTS.port)
    srv.add_argument("--encoding", type=str, default="v1", choices=_ENCODINGS)
    srv.add_argument("--log-level", type=str, default="INFO", choices=_LOG_LEVELS)

    # --- Commitment ---
    com = sub.add_parser("commit", help="Generate a server seed and nonce and print their commit")
    com.add_argument("--seed-bytes", type=int, default=_DEFAULTS.server_seed_bytes)
    com.add_argument("--nonce-bytes", type=int, default=_DEFAULTS.nonce_bytes)

    # --- Single round ---
    play = sub.add_parser("play", help="Run one game and print the full result")
    _add_round_args(play)

    ver = sub.add_parser("verify", help="Recompute a revealed round and compare published values")
    _add_round_args(ver)
    ver.add_argument("--commit-hex", type=str, default=None)
    ver.add_argument("--combined-seed", type=str, default=None)
    ver.add_argument("--peg-map-hash", type=str, default=None)
    ver.add_argument("--bin-index", type=int, default=None)

    # --- Batch verification ---
    batch = sub.add_parser("verify-batch", help="Verify a JSON list of revealed rounds")
    batch.add_argument("file", type=str)
    batch.add_argument("--report", type=str, default=_DEFAULTS.report_file)
    batch.add_argument("--encoding", type=str, default="v1", choices=_ENCODINGS)
    batch.add_argument("--log-level", type=str, default="INFO", choices=_LOG_LEVELS)

    return parser


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2))


def _run_server(args: argparse.Namespace) -> int:
    import uvicorn

    from pegdrop.api.app import create_app

    config = EngineConfig(
        host=args.host,
        port=args.port,
        peg_map_encoding=args.encoding,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


def _run_commit(args: argparse.Namespace) -> int:
    from pegdrop.systems.seeds import new_commitment

    commitment = new_commitment(args.seed_bytes, args.nonce_bytes)
    # Publish commit_hex now; keep server_seed private until reveal.
    _print_json(asdict(commitment))
    return 0


def _run_play(args: argparse.Namespace) -> int:
    from pegdrop.engine.game import run_game
    from pegdrop.systems.payout import payout_multiplier
    from pegdrop.systems.seeds import combine_seed, create_commit

    combined = combine_seed(args.server_seed, args.client_seed, args.nonce)
    result = run_game(combined, args.drop_column, encoding=args.encoding)
    _print_json(
        {
            "commit_hex": create_commit(args.server_seed, args.nonce),
            "combined_seed": combined,
            "drop_column": result.drop_column,
            "peg_map": result.peg_map.biases(),
            "peg_map_hash": result.peg_map_hash,
            "decisions": list(result.path.decisions),
            "bin_index": result.path.bin_index,
            "payout_multiplier": payout_multiplier(result.path.bin_index),
        }
    )
    return 0


def _run_verify(args: argparse.Namespace) -> int:
    from pegdrop.core.models import PublishedRound
    from pegdrop.engine.verifier import verify_round

    published = PublishedRound(
        commit_hex=args.commit_hex,
        combined_seed=args.combined_seed,
        peg_map_hash=args.peg_map_hash,
        bin_index=args.bin_index,
    )
    result = verify_round(
        args.server_seed, args.client_seed, args.nonce, args.drop_column,
        published, encoding=args.encoding,
    )
    payload = asdict(result)
    payload["ok"] = result.ok
    _print_json(payload)
    return 0 if result.ok else 1


def _run_verify_batch(args: argparse.Namespace) -> int:
    from pegdrop.engine.verifier import verify_batch
    from pegdrop.utils.report import VerificationReport

    try:
        records = json.loads(Path(args.file).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidInput(f"{args.file} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise InvalidInput(f"Cannot read {args.file}: {exc.strerror}") from exc
    if not isinstance(records, list):
        raise InvalidInput(f"{args.file} must contain a JSON list of rounds")

    report = VerificationReport(args.report, args.encoding)
    for record, result in zip(records, verify_batch(records, encoding=args.encoding)):
        report.record(record, result)
    report.flush()

    logger.info("Verified %d rounds, %d failed", len(records), report.failures)
    return 0 if report.failures == 0 else 1


def main(argv: list[str] | None = None) -> int:
    from pegdrop.utils.logging import setup_logging

    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])

    if args.command == "serve":
        return _run_server(args)

    # JSON results go to stdout; keep log lines on stderr.
    setup_logging(getattr(args, "log_level", "WARNING"), stream=sys.stderr)
    handlers = {
        "commit": _run_commit,
        "play": _run_play,
        "verify": _run_verify,
        "verify-batch": _run_verify_batch,
    }
    try:
        return handlers[args.command](args)
    except FairnessError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
