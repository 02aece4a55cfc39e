"""
Base-58 (Bitcoin alphabet) helpers.

Thin wrappers over the `base58` package that speak `str` on the text side and
`bytes` on the binary side, and raise a plain ``ValueError`` for any malformed
input so callers only have one failure type to handle.
"""

from __future__ import annotations

import base58 as _base58

from .bytes import BytesLike

ALPHABET = _base58.BITCOIN_ALPHABET.decode("ascii")


def b58encode(data: BytesLike) -> str:
    """Encode bytes to base-58 text. Leading zero bytes become leading '1's."""
    return _base58.b58encode(bytes(data)).decode("ascii")


def b58decode(text: str) -> bytes:
    """
    Decode base-58 text to bytes.

    Raises:
      TypeError if `text` is not a string.
      ValueError for characters outside the alphabet (including whitespace
      and non-ASCII input).
    """
    if not isinstance(text, str):
        raise TypeError(f"b58decode expects str, got {type(text).__name__}")
    if not text.isascii():
        raise ValueError("base58 text must be ASCII")
    bad = next((c for c in text if c not in ALPHABET), None)
    if bad is not None:
        raise ValueError(f"invalid base58 character {bad!r}")
    return _base58.b58decode(text)


__all__ = ["ALPHABET", "b58encode", "b58decode"]
