"""Tests for independent round verification and the batch report."""

import json
import logging

import pytest

from pegdrop.core.errors import InvalidInput
from pegdrop.core.models import PublishedRound
from pegdrop.engine.verifier import verify_batch, verify_round
from pegdrop.utils.report import VerificationReport

SERVER_SEED = "b2a5f3f32a4d9c6ee7a8c1d33456677890abcdeffedcba0987654321ffeeddcc"
CLIENT_SEED = "candidate-hello"
NONCE = "42"
COMMIT = "bb9acdc67f3f18f3345236a01f0e5072596657a9005c7d8a22cff061451a6b34"
COMBINED = "e1dddf77de27d395ea2be2ed49aa2a59bd6bf12ee8d350c16c008abd406c07e0"
PEG_MAP_HASH = "22e86f1298195b34834fc0a03f427b4e8f18c97d324021b15c4d10a40db26691"


def _published(**overrides) -> PublishedRound:
    values = dict(commit_hex=COMMIT, combined_seed=COMBINED, peg_map_hash=PEG_MAP_HASH, bin_index=6)
    values.update(overrides)
    return PublishedRound(**values)


class TestVerifyRound:
    def test_recomputes_reference_round(self):
        result = verify_round(SERVER_SEED, CLIENT_SEED, NONCE, 6)
        assert result.commit_hex == COMMIT
        assert result.combined_seed == COMBINED
        assert result.peg_map_hash == PEG_MAP_HASH
        assert result.bin_index == 6
        assert result.payout_multiplier == 0.3
        assert result.ok

    def test_matching_publication_passes(self):
        result = verify_round(SERVER_SEED, CLIENT_SEED, NONCE, 6, _published())
        assert result.ok
        assert result.mismatches == ()

    def test_hex_compared_case_insensitively(self):
        result = verify_round(SERVER_SEED, CLIENT_SEED, NONCE, 6, _published(commit_hex=COMMIT.upper()))
        assert result.ok

    def test_partial_publication(self):
        result = verify_round(SERVER_SEED, CLIENT_SEED, NONCE, 6, PublishedRound(commit_hex=COMMIT))
        assert result.ok

    def test_swapped_server_seed_detected(self):
        # Operator committed to one seed, then revealed another.
        other_seed = "00" + SERVER_SEED[2:]
        result = verify_round(other_seed, CLIENT_SEED, NONCE, 6, _published())
        assert not result.ok
        assert "commit_hex" in result.mismatches
        assert "combined_seed" in result.mismatches
        assert "peg_map_hash" in result.mismatches

    def test_wrong_bin_detected(self):
        result = verify_round(SERVER_SEED, CLIENT_SEED, NONCE, 6, _published(bin_index=0))
        assert result.mismatches == ("bin_index",)

    def test_mismatch_logged_without_secret(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pegdrop.engine.verifier"):
            verify_round(SERVER_SEED, CLIENT_SEED, NONCE, 6, _published(bin_index=0))
        assert "bin_index" in caplog.text
        assert SERVER_SEED not in caplog.text

    def test_invalid_column_rejected(self):
        with pytest.raises(InvalidInput):
            verify_round(SERVER_SEED, CLIENT_SEED, NONCE, 13)

    def test_legacy_encoding(self):
        result = verify_round(SERVER_SEED, CLIENT_SEED, NONCE, 6, encoding="legacy-json")
        assert result.peg_map_hash == "290841ed794b76ff7f82ec9b49817d855529fb6d8fa117c17614e1f16323ee41"


def _record(**overrides):
    record = {
        "server_seed": SERVER_SEED,
        "client_seed": CLIENT_SEED,
        "nonce": NONCE,
        "drop_column": 6,
        "commit_hex": COMMIT,
        "peg_map_hash": PEG_MAP_HASH,
        "bin_index": 6,
    }
    record.update(overrides)
    return record


class TestVerifyBatch:
    def test_preserves_order(self):
        results = verify_batch([_record(), _record(bin_index=3), _record(drop_column=0, bin_index=7)])
        assert [r.ok for r in results] == [True, False, True]

    def test_missing_key_rejected(self):
        record = _record()
        del record["nonce"]
        with pytest.raises(InvalidInput, match="nonce"):
            verify_batch([record])

    def test_malformed_published_value_rejected(self):
        with pytest.raises(InvalidInput):
            verify_batch([_record(bin_index="six")])

    def test_string_drop_column_rejected(self):
        with pytest.raises(InvalidInput):
            verify_batch([_record(drop_column="6")])

    @pytest.mark.parametrize("record", [1, "round", None, [SERVER_SEED, CLIENT_SEED, NONCE, 6]])
    def test_non_mapping_record_rejected(self, record):
        with pytest.raises(InvalidInput, match="Record 1 is not an object"):
            verify_batch([_record(), record])

    @pytest.mark.parametrize("key", ["server_seed", "client_seed", "nonce"])
    @pytest.mark.parametrize("value", [None, 42])
    def test_non_string_seed_field_rejected(self, key, value):
        with pytest.raises(InvalidInput, match=key):
            verify_batch([_record(**{key: value})])


class TestVerificationReport:
    def test_flush_writes_json(self, tmp_path):
        records = [_record(), _record(bin_index=1)]
        report = VerificationReport(tmp_path / "out" / "report.json", "v1")
        for record, result in zip(records, verify_batch(records)):
            report.record(record, result)
        report.flush()

        data = json.loads((tmp_path / "out" / "report.json").read_text(encoding="utf-8"))
        assert data["total_rounds"] == 2
        assert data["failed_rounds"] == 1
        assert data["encoding"] == "v1"
        assert data["rounds"][1]["mismatches"] == ["bin_index"]
        assert report.failures == 1
