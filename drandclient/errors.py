"""Error hierarchy for the drand client.

Two layers:
- Public errors (DrandClientError subclasses) are what callers of
  DrandClient see. Every verification failure collapses into
  InvalidBeaconError at this boundary.
- Scheme errors (SchemeError subclasses) carry the finer reason a scheme
  rejected a beacon. The client catches them and re-raises InvalidBeaconError
  with the scheme error chained as __cause__.
"""

from __future__ import annotations


class DrandClientError(Exception):
    """Base class for all errors raised by DrandClient."""

    kind = "error"

    def __init__(self, message: str = "", url: str = ""):
        super().__init__(message or self.kind.replace("_", " "))
        self.url = url


class InvalidRoundError(DrandClientError):
    """Round 0 (genesis) was requested. Raised before any network call."""

    kind = "invalid_round"


class NotRespondingError(DrandClientError):
    """The transport could not complete the request."""

    kind = "not_responding"

    def __init__(self, message: str = "", url: str = "", status_code: int = 0):
        super().__init__(message, url=url)
        self.status_code = status_code


class InvalidChainInfoError(DrandClientError):
    """The chain info document is malformed or incomplete."""

    kind = "invalid_chain_info"


class InvalidBeaconError(DrandClientError):
    """The beacon could not be decoded or failed verification."""

    kind = "invalid_beacon"


class SchemeError(Exception):
    """Base class for scheme-layer rejections."""


class UnsupportedSchemeError(SchemeError):
    """The chain's scheme id is not one the active scheme accepts."""

    def __init__(self, scheme_id: str, supported: frozenset[str]):
        super().__init__(
            f"chain scheme {scheme_id!r} not supported (expected one of {sorted(supported)})"
        )
        self.scheme_id = scheme_id


class UnverifiedBeaconError(SchemeError):
    """The beacon failed a structural precondition or the pairing check."""

    def __init__(self, reason: str, round_number: int = 0):
        super().__init__(f"round {round_number}: {reason}" if round_number else reason)
        self.reason = reason
        self.round_number = round_number
