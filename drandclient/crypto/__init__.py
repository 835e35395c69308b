"""Pairing-based signature checks."""

from drandclient.crypto.bls import (
    PUBLIC_KEY_LENGTH,
    SIGNATURE_LENGTH,
    is_valid_public_key,
    verify_signature,
)

__all__ = [
    "PUBLIC_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "is_valid_public_key",
    "verify_signature",
]
