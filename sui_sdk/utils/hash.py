"""
Hash wrappers used for transaction digests and address derivation.

All digests are NIST SHA3-256 (FIPS-202), which hashlib ships on every
supported interpreter. Each call builds a fresh hash context; contexts are
never shared between callers.
"""

from __future__ import annotations

import hashlib

from ..constants import HASH_TAG_SEPARATOR
from .bytes import BytesLike, to_hex


def sha3_256(data: BytesLike) -> bytes:
    """Return SHA3-256 digest of *data*."""
    h = hashlib.sha3_256()
    h.update(bytes(data))
    return h.digest()


def check_type_tag(type_tag: str) -> str:
    """
    Return `type_tag` if it can prefix a hash preimage, else raise ValueError.

    Tags are non-empty ASCII without any ``:``. A tag ending in ``:`` would
    let ``("A:", b":x")`` and ``("A", b"::x")`` share the preimage ``A:::x``.
    """
    if not isinstance(type_tag, str) or not type_tag:
        raise ValueError("type_tag must be a non-empty string")
    if not type_tag.isascii():
        raise ValueError("type_tag must be ASCII")
    if ":" in type_tag:
        raise ValueError(f"type_tag must not contain ':': {type_tag!r}")
    return type_tag


def typed_preimage(type_tag: str, data: BytesLike) -> bytes:
    """Domain-separated preimage: ``ascii(type_tag) || b"::" || data``."""
    tag = check_type_tag(type_tag).encode("ascii")
    return tag + HASH_TAG_SEPARATOR.encode("ascii") + bytes(data)


def hash_typed(type_tag: str, data: BytesLike) -> bytes:
    """SHA3-256 of `data` bound to the schema name `type_tag`."""
    return sha3_256(typed_preimage(type_tag, data))


class SHA3_256:
    """Streaming SHA3-256 hasher."""

    __slots__ = ("_h",)

    def __init__(self) -> None:
        self._h = hashlib.sha3_256()

    def update(self, data: BytesLike) -> "SHA3_256":
        self._h.update(bytes(data))
        return self

    def digest(self) -> bytes:
        return self._h.digest()

    def hexdigest(self, *, prefix: bool = True) -> str:
        return to_hex(self._h.digest(), prefix=prefix)


__all__ = [
    "sha3_256",
    "check_type_tag",
    "typed_preimage",
    "hash_typed",
    "SHA3_256",
]
