"""
Signature schemes and public keys.

- :mod:`sui_sdk.crypto.scheme`    — closed scheme registry (flags, key sizes)
- :mod:`sui_sdk.crypto.publickey` — Ed25519 / Secp256k1 public key objects
"""

from .publickey import (Ed25519PublicKey, PublicKey, PublicKeyInitData,
                        Secp256k1PublicKey, public_key_for_scheme)
from .scheme import (SIGNATURE_FLAG_TO_SCHEME, SIGNATURE_SCHEME_TO_FLAG,
                     SignatureScheme, resolve_scheme)

__all__ = [
    "SignatureScheme",
    "SIGNATURE_SCHEME_TO_FLAG",
    "SIGNATURE_FLAG_TO_SCHEME",
    "resolve_scheme",
    "PublicKey",
    "PublicKeyInitData",
    "Ed25519PublicKey",
    "Secp256k1PublicKey",
    "public_key_for_scheme",
]
