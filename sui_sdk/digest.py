"""
sui_sdk.digest
==============

Text codec for transaction digests: 32 raw bytes carried as base-58.

`decode_transaction_digest` returns a `DigestDecodeResult` holding either the
raw bytes or the failure reason. The boolean `is_valid_transaction_digest`
is a thin adapter that discards the reason; the strict helpers raise
`DigestError` with it instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import TX_DIGEST_LENGTH
from .errors import DigestError
from .utils.base58 import b58decode, b58encode
from .utils.bytes import BytesLike

__all__ = [
    "TX_DIGEST_LENGTH",
    "DigestDecodeResult",
    "decode_transaction_digest",
    "is_valid_transaction_digest",
    "encode_transaction_digest",
    "transaction_digest_to_bytes",
]


@dataclass(frozen=True)
class DigestDecodeResult:
    """Outcome of decoding digest text: exactly one of `value`/`error` is set."""

    value: Optional[bytes] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: bytes) -> "DigestDecodeResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "DigestDecodeResult":
        return cls(error=error)


def decode_transaction_digest(value: object) -> DigestDecodeResult:
    """Decode base-58 digest text; never raises."""
    if not isinstance(value, str):
        return DigestDecodeResult.failure(
            f"digest must be str, got {type(value).__name__}"
        )
    try:
        raw = b58decode(value)
    except ValueError as e:
        return DigestDecodeResult.failure(f"invalid base58: {e}")
    if len(raw) != TX_DIGEST_LENGTH:
        return DigestDecodeResult.failure(
            f"digest must decode to {TX_DIGEST_LENGTH} bytes, got {len(raw)}"
        )
    return DigestDecodeResult.success(raw)


def is_valid_transaction_digest(value: object) -> bool:
    """Returns whether `value` is a well-formed transaction digest."""
    return decode_transaction_digest(value).ok


def transaction_digest_to_bytes(value: str) -> bytes:
    res = decode_transaction_digest(value)
    if res.value is None:
        raise DigestError(res.error or "invalid digest", value=value)
    return res.value


def encode_transaction_digest(raw: BytesLike) -> str:
    """Base-58 text form of a 32-byte digest."""
    raw = bytes(raw)
    if len(raw) != TX_DIGEST_LENGTH:
        raise DigestError(
            f"digest must be {TX_DIGEST_LENGTH} bytes, got {len(raw)}", value=raw
        )
    return b58encode(raw)
