"""Unchained scheme (pedersen-bls-unchained).

Each round signs SHA-256(u64be(round)) alone, so rounds verify
independently and in any order.
"""

from __future__ import annotations

from drandclient.chain.beacon import Beacon, UnchainedBeacon
from drandclient.chain.info import UNCHAINED_SCHEME_ID
from drandclient.chain.types import u64be
from drandclient.schemes.base import Scheme, sha256


class UnchainedScheme(Scheme):
    name = "unchained"
    scheme_ids = frozenset({UNCHAINED_SCHEME_ID})
    beacon_type = UnchainedBeacon

    def message(self, beacon: Beacon) -> bytes:
        return sha256(u64be(beacon.round_number))
