"""drand randomness: CLI entry point.

Fetches a beacon, verifies it against the chain's public key, and prints it
as JSON.

Usage:
    python3 -m drandclient.cli                      # latest round
    python3 -m drandclient.cli --round 1000
    python3 -m drandclient.cli --info
    python3 -m drandclient.cli --scheme unchained --url https://api.drand.sh/<chain-hash>
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from dotenv import load_dotenv

from drandclient.client import DrandClient, client_from_settings
from drandclient.config import resolve_settings
from drandclient.errors import DrandClientError


def fetch(client: DrandClient, round_number: int | None = None) -> dict[str, Any]:
    """Fetch and verify one beacon, shaped for JSON output."""
    if round_number is None:
        beacon = client.latest_randomness()
    else:
        beacon = client.randomness(round_number)
    return {
        "status": "OK",
        "scheme": client.chain_info.scheme_id,
        "beacon": beacon.to_wire(),
        "randomness": beacon.randomness_bytes().hex(),
    }


def describe_chain(client: DrandClient) -> dict[str, Any]:
    return {"status": "OK", "chain_info": client.chain_info.to_wire()}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="drand: verified randomness")
    parser.add_argument("--round", type=int, metavar="N", help="Round to fetch (default: latest)")
    parser.add_argument("--url", help="Chain base URL (overrides DRAND_BASE_URL / config)")
    parser.add_argument("--scheme", help="chained | unchained (overrides DRAND_SCHEME / config)")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument("--info", action="store_true", help="Print chain info instead of a beacon")
    args = parser.parse_args(argv)

    load_dotenv()

    try:
        settings = resolve_settings(
            base_url=args.url, scheme=args.scheme, timeout_seconds=args.timeout,
        )
    except ValueError as e:
        print(json.dumps({"status": "ERROR", "error": "invalid_config", "message": str(e)}, indent=2))
        return 2

    try:
        with client_from_settings(settings) as client:
            result = describe_chain(client) if args.info else fetch(client, args.round)
    except DrandClientError as e:
        print(json.dumps({"status": "ERROR", "error": e.kind, "message": str(e)}, indent=2))
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
