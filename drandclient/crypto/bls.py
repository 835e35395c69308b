"""BLS12-381 signature verification for drand beacons.

drand's pedersen-bls schemes put public keys on G1 (48 bytes compressed) and
signatures on G2 (96 bytes compressed), hashing messages to G2 with the
basic ciphersuite tag BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_NUL_. That is
exactly py_ecc's G2Basic, so no custom hash-to-curve is needed.

Verification is a yes/no answer. Malformed encodings, points off the curve
or outside the subgroup all come back as False, never as an exception.
Stateless, safe to call from any number of threads.
"""

from __future__ import annotations

from py_ecc.bls import G2Basic

PUBLIC_KEY_LENGTH = 48
SIGNATURE_LENGTH = 96


def verify_signature(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """Return True iff signature is a valid BLS signature of message under public_key."""
    if len(public_key) != PUBLIC_KEY_LENGTH or len(signature) != SIGNATURE_LENGTH:
        return False
    try:
        return bool(G2Basic.Verify(public_key, message, signature))
    except Exception:
        return False


def is_valid_public_key(public_key: bytes) -> bool:
    """Check that public_key decodes to a usable G1 point (not infinity)."""
    if len(public_key) != PUBLIC_KEY_LENGTH:
        return False
    try:
        return bool(G2Basic.KeyValidate(public_key))
    except Exception:
        return False
