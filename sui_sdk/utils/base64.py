"""
Strict base-64 helpers for signatures, public keys and serialized envelopes.

Decoding is strict: characters outside the standard alphabet and incorrect
padding are errors, never silently dropped.
"""

from __future__ import annotations

import base64
import binascii

from ..errors import Base64DecodeError
from .bytes import BytesLike


def b64encode(data: BytesLike) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def b64decode(text: str) -> bytes:
    """
    Decode standard base-64 text.

    Raises:
      Base64DecodeError on non-str input, non-ASCII text, bad characters or
      bad padding.
    """
    if not isinstance(text, str):
        raise Base64DecodeError(f"base64 input must be str, got {type(text).__name__}")
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise Base64DecodeError(f"invalid base64: {e}") from e


__all__ = ["b64encode", "b64decode"]
