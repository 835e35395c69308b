"""Chain info: the trust anchor for one drand chain.

Served by GET {base_url}/info:
    {"public_key": "<hex>", "period": 30, "genesis_time": 1595431050,
     "hash": "<hex>", "groupHash": "<hex>", "schemeID": "pedersen-bls-chained",
     "metadata": {"beaconID": "default"}}

The public key is trusted as given. Legacy chains published no schemeID;
those are chained networks, so the field defaults to the chained id.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from drandclient.chain.types import HexBytes
from drandclient.clients.http import Transport, TransportError
from drandclient.crypto.bls import is_valid_public_key
from drandclient.errors import InvalidChainInfoError, NotRespondingError

CHAINED_SCHEME_ID = "pedersen-bls-chained"
UNCHAINED_SCHEME_ID = "pedersen-bls-unchained"

CHAIN_HASH_LENGTH = 32


class ChainInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    public_key: HexBytes
    period_seconds: int = Field(alias="period", gt=0)
    genesis_time: int = Field(ge=0)
    chain_hash: HexBytes = Field(alias="hash")
    scheme_id: str = Field(
        default=CHAINED_SCHEME_ID,
        validation_alias=AliasChoices("schemeID", "scheme_id"),
        serialization_alias="schemeID",
    )
    group_hash: HexBytes | None = Field(
        default=None,
        validation_alias=AliasChoices("groupHash", "group_hash"),
        serialization_alias="groupHash",
    )

    @field_validator("public_key")
    @classmethod
    def _check_public_key(cls, v: bytes) -> bytes:
        if not is_valid_public_key(v):
            raise ValueError("public_key is not a valid BLS12-381 G1 point")
        return v

    @field_validator("chain_hash")
    @classmethod
    def _check_chain_hash(cls, v: bytes) -> bytes:
        if len(v) != CHAIN_HASH_LENGTH:
            raise ValueError(f"hash must be {CHAIN_HASH_LENGTH} bytes, got {len(v)}")
        return v

    @field_validator("scheme_id", mode="before")
    @classmethod
    def _default_empty_scheme(cls, v: object) -> object:
        # Some legacy nodes serve "schemeID": "" rather than omitting it.
        if v is None or v == "":
            return CHAINED_SCHEME_ID
        return v

    def round_at(self, timestamp: float) -> int:
        """Round due at a unix timestamp. Round 1 is emitted at genesis."""
        if timestamp < self.genesis_time:
            return 0
        return int((timestamp - self.genesis_time) // self.period_seconds) + 1

    def round_time(self, round_number: int) -> int:
        """Unix time at which round_number is emitted."""
        if round_number < 1:
            raise ValueError("round must be >= 1")
        return self.genesis_time + (round_number - 1) * self.period_seconds

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def parse_chain_info(body: bytes | str) -> ChainInfo:
    """Decode a chain info document. Raises InvalidChainInfoError."""
    try:
        return ChainInfo.model_validate_json(body)
    except ValidationError as e:
        raise InvalidChainInfoError(f"invalid chain info: {e.error_count()} error(s)") from e


def fetch_chain_info(transport: Transport, base_url: str) -> ChainInfo:
    """GET {base_url}/info once and decode it. No retry, no caching."""
    url = f"{base_url.rstrip('/')}/info"
    try:
        body = transport.fetch(url)
    except TransportError as e:
        raise NotRespondingError(str(e), url=url, status_code=e.status_code) from e

    try:
        return parse_chain_info(body)
    except InvalidChainInfoError as e:
        e.url = url
        raise
