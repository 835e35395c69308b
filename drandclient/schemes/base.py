"""Scheme interface: how a drand network builds and checks its signatures.

A scheme answers three questions for a beacon:
  1. Which chain scheme ids does it accept?
  2. Does the record meet the scheme's structural preconditions?
  3. What exact message did the network sign?

verify() runs those in order, then the pairing check against the chain's
public key. Schemes hold no state; one instance serves any number of
concurrent verifications.
"""

from __future__ import annotations

import hashlib
import hmac
from abc import ABC, abstractmethod
from typing import ClassVar

from drandclient.chain.beacon import Beacon
from drandclient.chain.info import ChainInfo
from drandclient.crypto.bls import verify_signature
from drandclient.errors import UnsupportedSchemeError, UnverifiedBeaconError


class Scheme(ABC):
    name: ClassVar[str]
    scheme_ids: ClassVar[frozenset[str]]
    beacon_type: ClassVar[type[Beacon]]

    def supports(self, scheme_id: str) -> bool:
        return scheme_id in self.scheme_ids

    def precheck(self, beacon: Beacon) -> None:
        """Raise UnverifiedBeaconError if the record is structurally unfit."""
        if beacon.randomness is not None and not hmac.compare_digest(
            beacon.randomness, beacon.randomness_bytes()
        ):
            raise UnverifiedBeaconError(
                "randomness is not SHA-256 of signature", beacon.round_number
            )

    @abstractmethod
    def message(self, beacon: Beacon) -> bytes:
        """The digest the network signed for this beacon."""

    def verify(self, info: ChainInfo, beacon: Beacon) -> Beacon:
        """Return beacon unchanged if authentic, else raise a SchemeError."""
        if not self.supports(info.scheme_id):
            raise UnsupportedSchemeError(info.scheme_id, self.scheme_ids)

        self.precheck(beacon)

        if not verify_signature(info.public_key, self.message(beacon), beacon.signature):
            raise UnverifiedBeaconError("signature verification failed", beacon.round_number)

        return beacon

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()
