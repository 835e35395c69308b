"""Shared pydantic field types for drand wire documents."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

U64_MAX = 2**64 - 1


def _from_hex(value: Any) -> Any:
    """drand encodes every byte field as lowercase hex."""
    if isinstance(value, str):
        text = value[2:] if value.startswith(("0x", "0X")) else value
        try:
            return bytes.fromhex(text)
        except ValueError as e:
            raise ValueError(f"not a hex string: {value[:16]!r}") from e
    return value


HexBytes = Annotated[
    bytes,
    BeforeValidator(_from_hex),
    PlainSerializer(lambda b: b.hex(), return_type=str, when_used="json"),
]


def u64be(n: int) -> bytes:
    """Encode a round number as 8-byte big-endian."""
    return int(n).to_bytes(8, "big", signed=False)
