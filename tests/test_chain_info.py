"""Tests for chain info decoding and fetching."""

from __future__ import annotations

import hashlib
import json

import pytest
from pydantic import ValidationError

from drandclient.chain.beacon import ChainedBeacon, UnchainedBeacon
from drandclient.chain.info import ChainInfo, fetch_chain_info, parse_chain_info
from drandclient.errors import InvalidChainInfoError, NotRespondingError
from tests.mocks.mock_drand import (
    BASE_URL,
    CHAIN_HASH,
    CHAINED,
    GENESIS_TIME,
    PERIOD,
    UNCHAINED,
    FakeTransport,
    as_body,
    chain_info_doc,
    public_key,
)


class TestParseChainInfo:
    def test_full_document(self):
        info = parse_chain_info(as_body(chain_info_doc(UNCHAINED)))
        assert info.public_key == public_key()
        assert info.period_seconds == PERIOD
        assert info.genesis_time == GENESIS_TIME
        assert info.chain_hash.hex() == CHAIN_HASH
        assert info.scheme_id == UNCHAINED
        assert info.group_hash is not None

    def test_legacy_document_without_scheme_is_chained(self):
        info = parse_chain_info(as_body(chain_info_doc(None)))
        assert info.scheme_id == CHAINED

    def test_empty_scheme_is_chained(self):
        info = parse_chain_info(as_body(chain_info_doc("")))
        assert info.scheme_id == CHAINED

    def test_snake_case_scheme_key(self):
        doc = chain_info_doc(None)
        doc["scheme_id"] = UNCHAINED
        assert parse_chain_info(json.dumps(doc)).scheme_id == UNCHAINED

    def test_immutable(self):
        info = parse_chain_info(as_body(chain_info_doc()))
        with pytest.raises(ValidationError):
            info.period_seconds = 60

    def test_wire_round_trip(self):
        doc = chain_info_doc(UNCHAINED)
        wire = parse_chain_info(as_body(doc)).to_wire()
        assert wire["public_key"] == doc["public_key"]
        assert wire["hash"] == doc["hash"]
        assert wire["schemeID"] == UNCHAINED
        assert wire["period"] == PERIOD


class TestInvalidChainInfo:
    @pytest.mark.parametrize("field", ["public_key", "period", "genesis_time", "hash"])
    def test_missing_field(self, field):
        doc = chain_info_doc()
        del doc[field]
        with pytest.raises(InvalidChainInfoError):
            parse_chain_info(as_body(doc))

    def test_not_json(self):
        with pytest.raises(InvalidChainInfoError):
            parse_chain_info(b"<html>gateway timeout</html>")

    def test_public_key_not_hex(self):
        with pytest.raises(InvalidChainInfoError):
            parse_chain_info(as_body(chain_info_doc(public_key="zz" * 48)))

    def test_public_key_wrong_length(self):
        with pytest.raises(InvalidChainInfoError):
            parse_chain_info(as_body(chain_info_doc(public_key=public_key()[:32].hex())))

    def test_public_key_not_on_curve(self):
        with pytest.raises(InvalidChainInfoError):
            parse_chain_info(as_body(chain_info_doc(public_key="00" * 48)))

    def test_hash_wrong_length(self):
        with pytest.raises(InvalidChainInfoError):
            parse_chain_info(as_body(chain_info_doc(hash="abcd")))

    def test_zero_period(self):
        with pytest.raises(InvalidChainInfoError):
            parse_chain_info(as_body(chain_info_doc(period=0)))


class TestRoundTiming:
    @pytest.fixture
    def info(self) -> ChainInfo:
        return ChainInfo.model_validate(chain_info_doc())

    def test_before_genesis(self, info):
        assert info.round_at(GENESIS_TIME - 1) == 0

    def test_genesis_is_round_one(self, info):
        assert info.round_at(GENESIS_TIME) == 1
        assert info.round_time(1) == GENESIS_TIME

    def test_period_boundaries(self, info):
        assert info.round_at(GENESIS_TIME + PERIOD - 1) == 1
        assert info.round_at(GENESIS_TIME + PERIOD) == 2
        assert info.round_time(11) == GENESIS_TIME + 10 * PERIOD

    def test_round_time_rejects_genesis(self, info):
        with pytest.raises(ValueError):
            info.round_time(0)


class TestFetchChainInfo:
    def test_fetches_info_endpoint(self):
        transport = FakeTransport({f"{BASE_URL}/info": as_body(chain_info_doc())})
        info = fetch_chain_info(transport, BASE_URL + "/")
        assert transport.calls == [f"{BASE_URL}/info"]
        assert info.scheme_id == UNCHAINED

    def test_transport_failure(self):
        transport = FakeTransport()
        with pytest.raises(NotRespondingError) as exc:
            fetch_chain_info(transport, BASE_URL)
        assert exc.value.status_code == 404
        assert exc.value.url == f"{BASE_URL}/info"

    def test_bad_document(self):
        transport = FakeTransport({f"{BASE_URL}/info": b'{"period": 30}'})
        with pytest.raises(InvalidChainInfoError) as exc:
            fetch_chain_info(transport, BASE_URL)
        assert exc.value.url == f"{BASE_URL}/info"


class TestBeaconDecoding:
    def test_round_zero_rejected(self):
        with pytest.raises(ValidationError):
            UnchainedBeacon.model_validate({"round": 0, "signature": "aa" * 96})

    def test_round_above_u64_rejected(self):
        with pytest.raises(ValidationError):
            UnchainedBeacon.model_validate({"round": 2**64, "signature": "aa" * 96})

    def test_unchained_drops_previous_signature(self):
        beacon = UnchainedBeacon.model_validate(
            {"round": 3, "signature": "aa" * 96, "previous_signature": "bb" * 96}
        )
        assert not hasattr(beacon, "previous_signature")

    def test_chained_keeps_previous_signature(self):
        beacon = ChainedBeacon.model_validate(
            {"round": 3, "signature": "aa" * 96, "previous_signature": "bb" * 96}
        )
        assert beacon.previous_signature == b"\xbb" * 96

    def test_wire_shape(self):
        beacon = ChainedBeacon.model_validate(
            {"round": 3, "signature": "aa" * 96, "previous_signature": "bb" * 96}
        )
        assert beacon.to_wire() == {
            "round": 3,
            "signature": "aa" * 96,
            "previous_signature": "bb" * 96,
        }

    def test_randomness_is_hash_of_signature(self):
        beacon = UnchainedBeacon.model_validate({"round": 3, "signature": "aa" * 96})
        assert beacon.randomness_bytes() == hashlib.sha256(b"\xaa" * 96).digest()
