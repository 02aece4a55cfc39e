"""
sui_sdk.crypto.publickey
========================

Public keys for the supported signature schemes.

A public key is a small capability: it knows its `scheme` and exposes its raw
bytes through `to_bytes()`. Keys are built from any of the `PublicKeyInitData`
shapes the RPC and wallets hand around:

- ``str``      base-64 text (the RPC's wire form)
- bytes-like   raw key bytes
- iterable     of ints in ``0..255`` (JSON arrays)

Verification is delegated to `cryptography`; this module never touches
private keys.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Type, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, ed25519
from cryptography.hazmat.primitives.asymmetric.utils import \
    encode_dss_signature

from ..address import normalize_sui_address
from ..constants import SUI_ADDRESS_LENGTH
from ..errors import PublicKeyError, UnsupportedSchemeError
from ..utils.base64 import b64decode, b64encode
from ..utils.bytes import BytesLike
from ..utils.hash import SHA3_256
from .scheme import SchemeLike, SignatureScheme, resolve_scheme

__all__ = [
    "PublicKeyInitData",
    "PublicKey",
    "Ed25519PublicKey",
    "Secp256k1PublicKey",
    "public_key_for_scheme",
]

PublicKeyInitData = Union[str, bytes, bytearray, memoryview, Iterable[int]]


def _init_bytes(value: PublicKeyInitData) -> bytes:
    if isinstance(value, str):
        return b64decode(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    try:
        return bytes(list(value))
    except (TypeError, ValueError) as e:
        raise PublicKeyError(
            f"unsupported public key init data: {type(value).__name__}"
        ) from e


class PublicKey(ABC):
    """Base class; concrete keys pin `scheme` as a class attribute."""

    __slots__ = ("_data",)

    @property
    @abstractmethod
    def scheme(self) -> SignatureScheme: ...

    def __init__(self, value: PublicKeyInitData):
        data = _init_bytes(value)
        size = self.scheme.public_key_size
        if len(data) != size:
            raise PublicKeyError(
                f"invalid {self.scheme.value} public key size: expected {size}, got {len(data)}"
            )
        self._data = data

    @property
    def flag(self) -> int:
        return self.scheme.flag

    def to_bytes(self) -> bytes:
        return self._data

    def to_base64(self) -> str:
        return b64encode(self._data)

    def to_sui_address(self) -> str:
        """
        Address controlled by this key: the first 20 bytes of
        ``sha3_256(flag || public_key)``, in canonical text form.
        """
        h = SHA3_256().update(bytes([self.flag])).update(self._data)
        return normalize_sui_address(h.hexdigest(prefix=False)[: SUI_ADDRESS_LENGTH * 2])

    def equals(self, other: "PublicKey") -> bool:
        return (
            isinstance(other, PublicKey)
            and other.scheme is self.scheme
            and other.to_bytes() == self._data
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.scheme, self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_base64()!r})"

    @abstractmethod
    def verify(self, message: BytesLike, signature: BytesLike) -> bool:
        """True iff `signature` is valid for `message` under this key."""


class Ed25519PublicKey(PublicKey):
    scheme = SignatureScheme.ED25519

    __slots__ = ()

    def verify(self, message: BytesLike, signature: BytesLike) -> bool:
        """Check a raw 64-byte Ed25519 signature over `message`."""
        sig = bytes(signature)
        if len(sig) != self.scheme.signature_size:
            return False
        key = ed25519.Ed25519PublicKey.from_public_bytes(self._data)
        try:
            key.verify(sig, bytes(message))
        except InvalidSignature:
            return False
        return True


class Secp256k1PublicKey(PublicKey):
    scheme = SignatureScheme.SECP256K1

    __slots__ = ()

    def _point(self) -> ec.EllipticCurvePublicKey:
        try:
            return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), self._data)
        except ValueError as e:
            raise PublicKeyError(f"not a valid compressed secp256k1 point: {e}") from e

    def verify(self, message: BytesLike, signature: BytesLike) -> bool:
        """Check a compact ``r || s`` ECDSA signature over SHA-256(message)."""
        sig = bytes(signature)
        if len(sig) != self.scheme.signature_size:
            return False
        r = int.from_bytes(sig[:32], "big")
        s = int.from_bytes(sig[32:], "big")
        try:
            self._point().verify(
                encode_dss_signature(r, s), bytes(message), ec.ECDSA(hashes.SHA256())
            )
        except InvalidSignature:
            return False
        return True


_KEY_CLASSES: Dict[SignatureScheme, Type[PublicKey]] = {
    SignatureScheme.ED25519: Ed25519PublicKey,
    SignatureScheme.SECP256K1: Secp256k1PublicKey,
}


def public_key_for_scheme(
    scheme: SchemeLike, key: Union[PublicKey, PublicKeyInitData]
) -> PublicKey:
    """
    Resolve `key` to a public key object of `scheme`.

    A key object of the same scheme is returned unchanged; raw init data is
    wrapped in the scheme's key class. A key object of a *different* scheme
    is an error rather than being reinterpreted.
    """
    resolved = resolve_scheme(scheme)
    if isinstance(key, PublicKey):
        if key.scheme is not resolved:
            raise UnsupportedSchemeError(
                key.scheme, message=f"public key scheme does not match {resolved.value}"
            )
        return key
    return _KEY_CLASSES[resolved](key)
