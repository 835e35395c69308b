"""Configuration loader for the drand client.

Loads config/client.yaml, then applies DRAND_* environment overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from drandclient.schemes import SCHEMES

WORKSPACE = Path(__file__).resolve().parent.parent
CONFIG_DIR = WORKSPACE / "config"

DEFAULT_BASE_URL = "https://api.drand.sh"

ENV_OVERRIDES = {
    "DRAND_BASE_URL": "base_url",
    "DRAND_SCHEME": "scheme",
    "DRAND_TIMEOUT": "timeout_seconds",
}


class ClientSettings(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    scheme: str = "chained"
    timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v

    @field_validator("scheme")
    @classmethod
    def _known_scheme(cls, v: str) -> str:
        name = v.strip().lower()
        if name not in SCHEMES:
            raise ValueError(f"unknown scheme {v!r} (expected one of {sorted(SCHEMES)})")
        return name


def load_client_config(path: Path | None = None) -> dict[str, Any]:
    """Load config/client.yaml. Raises ValueError if it is not a mapping."""
    path = path or CONFIG_DIR / "client.yaml"
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must hold a mapping, got {type(data).__name__}")
    return data


def resolve_settings(
    path: Path | None = None,
    environ: dict[str, str] | None = None,
    **overrides: Any,
) -> ClientSettings:
    """Merge file config, environment and explicit overrides (in that order).

    Overrides whose value is None are ignored so argparse defaults pass through.
    """
    env = os.environ if environ is None else environ
    data = load_client_config(path)
    for var, key in ENV_OVERRIDES.items():
        if env.get(var):
            data[key] = env[var]
    data.update({k: v for k, v in overrides.items() if v is not None})
    return ClientSettings.model_validate(data)
