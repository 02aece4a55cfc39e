"""
sui_sdk.crypto.scheme
=====================

Closed registry of signature schemes.

Each scheme maps to exactly one 1-byte wire flag (the first byte of a
serialized signature envelope) and one fixed public-key size:

    ===========  ====  ==========  ==========
    scheme       flag  pubkey (B)  sig (B)
    ===========  ====  ==========  ==========
    ED25519      0x00  32          64
    Secp256k1    0x01  33          64
    ===========  ====  ==========  ==========

Secp256k1 public keys are SEC1 *compressed* points. Adding a scheme means
adding an enum member, a `_SCHEMES` row and a key class; nothing falls
through to a default.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from ..errors import UnsupportedSchemeError

__all__ = [
    "SignatureScheme",
    "SchemeInfo",
    "SIGNATURE_SCHEME_TO_FLAG",
    "SIGNATURE_FLAG_TO_SCHEME",
    "resolve_scheme",
    "SchemeLike",
]


class SignatureScheme(str, Enum):
    # Values are the wire names used by the RPC and the TS SDK.
    ED25519 = "ED25519"
    SECP256K1 = "Secp256k1"

    @property
    def info(self) -> "SchemeInfo":
        return _SCHEMES[self]

    @property
    def flag(self) -> int:
        return _SCHEMES[self].flag

    @property
    def public_key_size(self) -> int:
        return _SCHEMES[self].public_key_size

    @property
    def signature_size(self) -> int:
        return _SCHEMES[self].signature_size

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


@dataclass(frozen=True)
class SchemeInfo:
    flag: int
    public_key_size: int
    signature_size: int


_SCHEMES: Dict[SignatureScheme, SchemeInfo] = {
    SignatureScheme.ED25519: SchemeInfo(flag=0x00, public_key_size=32, signature_size=64),
    SignatureScheme.SECP256K1: SchemeInfo(flag=0x01, public_key_size=33, signature_size=64),
}

SIGNATURE_SCHEME_TO_FLAG: Dict[SignatureScheme, int] = {
    s: info.flag for s, info in _SCHEMES.items()
}
SIGNATURE_FLAG_TO_SCHEME: Dict[int, SignatureScheme] = {
    flag: s for s, flag in SIGNATURE_SCHEME_TO_FLAG.items()
}

_BY_NAME: Dict[str, SignatureScheme] = {s.value.lower(): s for s in SignatureScheme}

SchemeLike = Union[SignatureScheme, str, int]


def resolve_scheme(value: SchemeLike) -> SignatureScheme:
    """
    Resolve an enum member, a wire name (case-insensitive) or a wire flag.

    Raises:
      UnsupportedSchemeError for anything outside the registry.
    """
    if isinstance(value, SignatureScheme):
        return value
    if isinstance(value, str):
        scheme = _BY_NAME.get(value.strip().lower())
        if scheme is not None:
            return scheme
    elif isinstance(value, int) and not isinstance(value, bool):
        scheme = SIGNATURE_FLAG_TO_SCHEME.get(value)
        if scheme is not None:
            return scheme
    raise UnsupportedSchemeError(value)
