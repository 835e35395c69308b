"""HTTP transport for the drand client.

A thin synchronous wrapper over httpx: one GET, raw body back, or a
TransportError. No retries, no caching, no auth: a failed
fetch surfaces to the caller immediately.
"""

from __future__ import annotations

from typing import Protocol

import httpx

DEFAULT_TIMEOUT = 10.0
USER_AGENT = "drandclient/0.1"


class TransportError(Exception):
    """Structured transport failure."""

    def __init__(self, message: str, status_code: int = 0, url: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class Transport(Protocol):
    def fetch(self, url: str) -> bytes: ...


class HttpTransport:
    """httpx-backed Transport.

    Usage:
        with HttpTransport(timeout=5.0) as transport:
            body = transport.fetch("https://api.drand.sh/info")
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        client: httpx.Client | None = None,
    ):
        self.timeout = timeout
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout),
            headers={
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
                **(headers or {}),
            },
        )

    def fetch(self, url: str) -> bytes:
        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"Connection error to {url}: {e}", url=url) from e

        if response.status_code >= 400:
            raise TransportError(
                f"HTTP {response.status_code} from {url}: {response.text[:200]}",
                status_code=response.status_code,
                url=url,
            )

        return response.content

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
