"""Wire models: chain info and beacon records."""

from drandclient.chain.beacon import Beacon, ChainedBeacon, UnchainedBeacon
from drandclient.chain.info import (
    CHAINED_SCHEME_ID,
    UNCHAINED_SCHEME_ID,
    ChainInfo,
    fetch_chain_info,
    parse_chain_info,
)

__all__ = [
    "Beacon",
    "ChainedBeacon",
    "UnchainedBeacon",
    "CHAINED_SCHEME_ID",
    "UNCHAINED_SCHEME_ID",
    "ChainInfo",
    "fetch_chain_info",
    "parse_chain_info",
]
