"""DrandClient: fetch chain info once, then fetch-and-verify beacons.

Construction fetches and parses {base_url}/info. If that fails no client is
produced. After that the client is read-only: chain info is never refetched
and nothing carries over between beacon requests, so calls may run in any
order or concurrently.

Error mapping at this boundary:
    transport failure       -> NotRespondingError
    undecodable beacon      -> InvalidBeaconError
    any SchemeError         -> InvalidBeaconError (cause chained)
    round 0                 -> InvalidRoundError, no request made
"""

from __future__ import annotations

import sys
import time

from pydantic import ValidationError

from drandclient.chain.beacon import Beacon
from drandclient.chain.info import ChainInfo, fetch_chain_info
from drandclient.chain.types import U64_MAX
from drandclient.clients.http import DEFAULT_TIMEOUT, HttpTransport, Transport, TransportError
from drandclient.config import ClientSettings
from drandclient.errors import (
    DrandClientError,
    InvalidBeaconError,
    InvalidRoundError,
    NotRespondingError,
    SchemeError,
)
from drandclient.schemes import ChainedScheme, Scheme, UnchainedScheme, scheme_for_name


def _log(msg: str) -> None:
    """Print timestamped diagnostic to stderr."""
    ts = time.strftime("%H:%M:%S")
    print(f"[drand {ts}] {msg}", file=sys.stderr)


class DrandClient:
    """Verifying client for one drand chain.

    Usage:
        with new_chained_client("https://api.drand.sh") as client:
            beacon = client.latest_randomness()
            print(beacon.round_number, beacon.randomness_bytes().hex())
    """

    def __init__(
        self,
        scheme: Scheme,
        base_url: str,
        transport: Transport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.scheme = scheme
        self.base_url = base_url.rstrip("/")
        self._owns_transport = transport is None
        self._transport = transport or HttpTransport(timeout=timeout)
        try:
            self._chain_info = fetch_chain_info(self._transport, self.base_url)
        except DrandClientError as e:
            _log(f"chain info from {self.base_url} rejected: {e}")
            self.close()
            raise
        _log(
            f"chain {self._chain_info.chain_hash.hex()[:16]}... "
            f"scheme={self._chain_info.scheme_id} period={self._chain_info.period_seconds}s"
        )

    @property
    def chain_info(self) -> ChainInfo:
        return self._chain_info

    def latest_randomness(self) -> Beacon:
        """Fetch and verify the most recent beacon."""
        return self._fetch_beacon_tag("latest")

    def randomness(self, round_number: int) -> Beacon:
        """Fetch and verify the beacon for a specific round (>= 1)."""
        if round_number == 0:
            raise InvalidRoundError("round 0 is the genesis round and carries no beacon")
        if round_number < 0:
            raise InvalidRoundError(f"round must be positive, got {round_number}")
        if round_number > U64_MAX:
            raise InvalidRoundError(f"round exceeds 64 bits: {round_number}")
        beacon = self._fetch_beacon_tag(str(round_number))
        if beacon.round_number != round_number:
            _log(f"asked for round {round_number}, got round {beacon.round_number}")
            raise InvalidBeaconError(
                f"requested round {round_number}, received {beacon.round_number}"
            )
        return beacon

    def _fetch_beacon_tag(self, tag: str) -> Beacon:
        url = f"{self.base_url}/public/{tag}"
        try:
            body = self._transport.fetch(url)
        except TransportError as e:
            _log(f"{url} not responding: {e}")
            raise NotRespondingError(str(e), url=url, status_code=e.status_code) from e

        try:
            beacon = self.scheme.beacon_type.model_validate_json(body)
        except ValidationError as e:
            _log(f"{url} returned an undecodable beacon ({e.error_count()} error(s))")
            raise InvalidBeaconError("beacon could not be decoded", url=url) from e

        try:
            return self.scheme.verify(self._chain_info, beacon)
        except SchemeError as e:
            _log(f"{url} rejected by {self.scheme.name} scheme: {e}")
            raise InvalidBeaconError(url=url) from e

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, HttpTransport):
            self._transport.close()

    def __enter__(self) -> "DrandClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"DrandClient(scheme={self.scheme.name!r}, base_url={self.base_url!r})"


def new_client(
    scheme: Scheme,
    base_url: str,
    transport: Transport | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> DrandClient:
    return DrandClient(scheme, base_url, transport=transport, timeout=timeout)


def new_chained_client(
    base_url: str, transport: Transport | None = None, timeout: float = DEFAULT_TIMEOUT
) -> DrandClient:
    return new_client(ChainedScheme(), base_url, transport=transport, timeout=timeout)


def new_unchained_client(
    base_url: str, transport: Transport | None = None, timeout: float = DEFAULT_TIMEOUT
) -> DrandClient:
    return new_client(UnchainedScheme(), base_url, transport=transport, timeout=timeout)


def client_from_settings(settings: ClientSettings, transport: Transport | None = None) -> DrandClient:
    """Build a client from a resolved ClientSettings."""
    return new_client(
        scheme_for_name(settings.scheme),
        settings.base_url,
        transport=transport,
        timeout=settings.timeout_seconds,
    )
