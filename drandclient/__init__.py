"""drandclient: verifying HTTP client for the drand randomness beacon.

Every beacon is checked against the chain's BLS public key before it is
returned. Two network flavours are supported:

Chained:   signature over SHA-256(previous_signature || round)
Unchained: signature over SHA-256(round)

Client:  drandclient/client.py   (fetch chain info once, fetch-and-verify beacons)
Schemes: drandclient/schemes/    (message construction, preconditions)
Crypto:  drandclient/crypto/     (BLS12-381 pairing check via py_ecc)
"""

from drandclient.chain import (
    CHAINED_SCHEME_ID,
    UNCHAINED_SCHEME_ID,
    Beacon,
    ChainedBeacon,
    ChainInfo,
    UnchainedBeacon,
    fetch_chain_info,
    parse_chain_info,
)
from drandclient.client import (
    DrandClient,
    client_from_settings,
    new_chained_client,
    new_client,
    new_unchained_client,
)
from drandclient.clients.http import HttpTransport, Transport, TransportError
from drandclient.config import ClientSettings, load_client_config, resolve_settings
from drandclient.crypto import verify_signature
from drandclient.errors import (
    DrandClientError,
    InvalidBeaconError,
    InvalidChainInfoError,
    InvalidRoundError,
    NotRespondingError,
    SchemeError,
    UnsupportedSchemeError,
    UnverifiedBeaconError,
)
from drandclient.schemes import ChainedScheme, Scheme, UnchainedScheme, scheme_for_name

__version__ = "0.1.0"

__all__ = [
    # Client
    "DrandClient",
    "new_client",
    "new_chained_client",
    "new_unchained_client",
    "client_from_settings",
    # Chain
    "ChainInfo",
    "Beacon",
    "ChainedBeacon",
    "UnchainedBeacon",
    "CHAINED_SCHEME_ID",
    "UNCHAINED_SCHEME_ID",
    "fetch_chain_info",
    "parse_chain_info",
    # Schemes
    "Scheme",
    "ChainedScheme",
    "UnchainedScheme",
    "scheme_for_name",
    # Transport
    "HttpTransport",
    "Transport",
    "TransportError",
    # Config
    "ClientSettings",
    "load_client_config",
    "resolve_settings",
    # Crypto
    "verify_signature",
    # Errors
    "DrandClientError",
    "InvalidRoundError",
    "NotRespondingError",
    "InvalidChainInfoError",
    "InvalidBeaconError",
    "SchemeError",
    "UnsupportedSchemeError",
    "UnverifiedBeaconError",
]
