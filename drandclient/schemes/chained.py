"""Chained scheme (pedersen-bls-chained).

Each round signs SHA-256(previous_signature || u64be(round)), so every
signature commits to the one before it. Only the presented signature is
checked: the referenced previous round is not fetched or re-verified, and
trust in the linkage extends back exactly one hop.
"""

from __future__ import annotations

from drandclient.chain.beacon import Beacon, ChainedBeacon
from drandclient.chain.info import CHAINED_SCHEME_ID
from drandclient.chain.types import u64be
from drandclient.errors import UnverifiedBeaconError
from drandclient.schemes.base import Scheme, sha256


class ChainedScheme(Scheme):
    name = "chained"
    scheme_ids = frozenset({CHAINED_SCHEME_ID})
    beacon_type = ChainedBeacon

    def precheck(self, beacon: Beacon) -> None:
        if getattr(beacon, "previous_signature", None) is None:
            raise UnverifiedBeaconError("missing previous_signature", beacon.round_number)
        super().precheck(beacon)

    def message(self, beacon: Beacon) -> bytes:
        return sha256(beacon.previous_signature + u64be(beacon.round_number))
