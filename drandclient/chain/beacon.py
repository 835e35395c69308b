"""Beacon records as served by GET {base_url}/public/{latest|round}.

Wire shape:
    {"round": 1234, "signature": "<hex>", "previous_signature": "<hex>",
     "randomness": "<hex>"}

previous_signature only exists on chained networks. randomness is
SHA-256(signature) and is optional on the wire; when present it is checked.
Models are frozen: a verified beacon is handed back to the caller exactly as
it was decoded.
"""

from __future__ import annotations

import hashlib

from pydantic import BaseModel, ConfigDict, Field

from drandclient.chain.types import U64_MAX, HexBytes


class Beacon(BaseModel):
    """Fields common to every drand beacon."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    round_number: int = Field(alias="round", ge=1, le=U64_MAX)
    signature: HexBytes
    randomness: HexBytes | None = None

    def randomness_bytes(self) -> bytes:
        """The beacon's random output: SHA-256 of the signature."""
        return hashlib.sha256(self.signature).digest()

    def to_wire(self) -> dict:
        """Serialize back to drand's JSON shape (hex strings, wire keys)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ChainedBeacon(Beacon):
    """Beacon from a chained network: signs over the previous signature too."""

    previous_signature: HexBytes | None = None


class UnchainedBeacon(Beacon):
    """Beacon from an unchained network: signs over its round number alone.

    A stray previous_signature on the wire is dropped during decoding.
    """
