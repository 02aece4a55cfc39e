"""
sui_sdk.tx.envelope
===================

The signing envelope: the scheme-tagged signature a validator expects next
to the transaction bytes.

Layout (fixed; must match the verifier):

    envelope = flag (1 byte) || signature || public_key

The envelope is built once per signing operation and is not persisted. Its
base-64 form is what the execution RPC accepts as the serialized signature.

This module provides:
- `build_envelope(scheme, signature, public_key)` → envelope bytes
- `SigningEnvelope`, the same, as a value with `to_bytes` / `to_base64`,
  the inverse `from_bytes` / `from_base64`, and `verify(message)`
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from ..crypto.publickey import (PublicKey, PublicKeyInitData,
                                public_key_for_scheme)
from ..crypto.scheme import (SIGNATURE_FLAG_TO_SCHEME, SchemeLike,
                             SignatureScheme, resolve_scheme)
from ..errors import EnvelopeError, UnsupportedSchemeError
from ..utils.base64 import b64decode, b64encode
from ..utils.bytes import BytesLike

log = logging.getLogger(__name__)

SignatureInput = Union[str, bytes, bytearray, memoryview]

__all__ = [
    "SignatureInput",
    "SigningEnvelope",
    "build_envelope",
    "signature_bytes",
]


def signature_bytes(signature: SignatureInput) -> bytes:
    """Base-64 text is decoded (strictly); raw bytes pass through unchanged."""
    if isinstance(signature, str):
        return b64decode(signature)
    if isinstance(signature, (bytes, bytearray, memoryview)):
        return bytes(signature)
    raise TypeError(
        f"signature must be base64 str or bytes, got {type(signature).__name__}"
    )


@dataclass(frozen=True)
class SigningEnvelope:
    scheme: SignatureScheme
    signature: bytes
    public_key: PublicKey

    def __post_init__(self) -> None:
        if self.public_key.scheme is not self.scheme:
            raise UnsupportedSchemeError(
                self.public_key.scheme,
                message=f"public key scheme does not match {self.scheme.value}",
            )

    @classmethod
    def build(
        cls,
        scheme: SchemeLike,
        signature: SignatureInput,
        public_key: Union[PublicKey, PublicKeyInitData],
    ) -> "SigningEnvelope":
        resolved = resolve_scheme(scheme)
        sig = signature_bytes(signature)
        pk = public_key_for_scheme(resolved, public_key)
        env = cls(scheme=resolved, signature=sig, public_key=pk)
        log.debug(
            "signing envelope built",
            extra={"scheme": resolved.value, "sig_len": len(sig), "env_len": len(env)},
        )
        return env

    @property
    def flag(self) -> int:
        return self.scheme.flag

    def __len__(self) -> int:
        return 1 + len(self.signature) + len(self.public_key.to_bytes())

    def to_bytes(self) -> bytes:
        return bytes([self.flag]) + self.signature + self.public_key.to_bytes()

    def to_base64(self) -> str:
        return b64encode(self.to_bytes())

    @classmethod
    def from_bytes(cls, raw: BytesLike) -> "SigningEnvelope":
        """
        Split a serialized envelope. The flag selects the scheme, whose fixed
        public-key size locates the key at the tail; the signature is the rest.
        """
        raw = bytes(raw)
        if not raw:
            raise EnvelopeError("empty signature envelope")
        scheme = SIGNATURE_FLAG_TO_SCHEME.get(raw[0])
        if scheme is None:
            raise UnsupportedSchemeError(raw[0], message="unknown signature scheme flag")
        pk_size = scheme.public_key_size
        if len(raw) <= 1 + pk_size:
            raise EnvelopeError(
                f"{scheme.value} envelope too short: {len(raw)} bytes"
            )
        sig = raw[1:-pk_size]
        pk = public_key_for_scheme(scheme, raw[-pk_size:])
        return cls(scheme=scheme, signature=sig, public_key=pk)

    @classmethod
    def from_base64(cls, text: str) -> "SigningEnvelope":
        return cls.from_bytes(b64decode(text))

    def verify(self, message: BytesLike) -> bool:
        """Check the carried signature over `message` with the carried key."""
        return self.public_key.verify(message, self.signature)


def build_envelope(
    scheme: SchemeLike,
    signature: SignatureInput,
    public_key: Union[PublicKey, PublicKeyInitData],
) -> bytes:
    """
    ``flag || signature || public_key`` for the given scheme.

    Raises:
      UnsupportedSchemeError  scheme outside the supported set, or a key
                              object of another scheme
      Base64DecodeError       malformed base-64 signature or key text
      PublicKeyError          key of the wrong size for the scheme
    """
    return SigningEnvelope.build(scheme, signature, public_key).to_bytes()
