"""Tests for the command-line entry point."""

import json
import logging

import pytest

from pegdrop.__main__ import main
from pegdrop.systems.seeds import create_commit

SERVER_SEED = "b2a5f3f32a4d9c6ee7a8c1d33456677890abcdeffedcba0987654321ffeeddcc"
ROUND_ARGS = ["--server-seed", SERVER_SEED, "--client-seed", "candidate-hello", "--nonce", "42"]


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # main() installs its own root handler; undo it so later tests keep pytest's capture.
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCommands:
    def test_commit(self, capsys):
        assert main(["commit"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["commit_hex"] == create_commit(out["server_seed"], out["nonce"])

    def test_play(self, capsys):
        assert main(["play", *ROUND_ARGS, "--drop-column", "6"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["bin_index"] == 6
        assert out["combined_seed"].startswith("e1dddf77")
        assert len(out["decisions"]) == 12

    def test_verify_ok(self, capsys):
        code = main(["verify", *ROUND_ARGS, "--bin-index", "6"])
        assert code == 0
        assert json.loads(capsys.readouterr().out)["ok"] is True

    def test_verify_mismatch_exit_status(self, capsys):
        code = main(["verify", *ROUND_ARGS, "--bin-index", "2"])
        assert code == 1
        out = json.loads(capsys.readouterr().out)
        assert out["mismatches"] == ["bin_index"]

    def test_invalid_input_exit_status(self, capsys):
        code = main(["play", *ROUND_ARGS, "--drop-column", "20"])
        assert code == 2
        assert "drop_column" in capsys.readouterr().err

    def test_verify_batch(self, tmp_path, capsys):
        rounds = [
            {"server_seed": SERVER_SEED, "client_seed": "candidate-hello", "nonce": "42",
             "drop_column": 6, "bin_index": 6},
            {"server_seed": SERVER_SEED, "client_seed": "candidate-hello", "nonce": "42",
             "drop_column": 6, "bin_index": 5},
        ]
        src = tmp_path / "rounds.json"
        src.write_text(json.dumps(rounds), encoding="utf-8")
        report = tmp_path / "report.json"

        code = main(["verify-batch", str(src), "--report", str(report)])
        assert code == 1
        data = json.loads(report.read_text(encoding="utf-8"))
        assert data["failed_rounds"] == 1

    def test_verify_batch_rejects_non_list(self, tmp_path):
        src = tmp_path / "rounds.json"
        src.write_text("{}", encoding="utf-8")
        assert main(["verify-batch", str(src), "--report", str(tmp_path / "r.json")]) == 2

    def test_verify_batch_missing_file(self, tmp_path, capsys):
        missing = tmp_path / "nowhere.json"
        assert main(["verify-batch", str(missing), "--report", str(tmp_path / "r.json")]) == 2
        assert "Cannot read" in capsys.readouterr().err

    def test_verify_batch_rejects_non_object_round(self, tmp_path, capsys):
        src = tmp_path / "rounds.json"
        src.write_text("[1]", encoding="utf-8")
        assert main(["verify-batch", str(src), "--report", str(tmp_path / "r.json")]) == 2
        assert "not an object" in capsys.readouterr().err
