"""Beacon schemes: chained and unchained drand networks."""

from __future__ import annotations

from drandclient.chain.info import CHAINED_SCHEME_ID, UNCHAINED_SCHEME_ID
from drandclient.schemes.base import Scheme
from drandclient.schemes.chained import ChainedScheme
from drandclient.schemes.unchained import UnchainedScheme

SCHEMES: dict[str, type[Scheme]] = {
    ChainedScheme.name: ChainedScheme,
    UnchainedScheme.name: UnchainedScheme,
    CHAINED_SCHEME_ID: ChainedScheme,
    UNCHAINED_SCHEME_ID: UnchainedScheme,
}


def scheme_for_name(name: str) -> Scheme:
    """Map "chained"/"unchained" or a full drand scheme id to a Scheme."""
    try:
        return SCHEMES[name.strip().lower()]()
    except KeyError:
        raise ValueError(
            f"unknown scheme {name!r} (expected one of {sorted(SCHEMES)})"
        ) from None


__all__ = [
    "SCHEMES",
    "Scheme",
    "ChainedScheme",
    "UnchainedScheme",
    "scheme_for_name",
]
