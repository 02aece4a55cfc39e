"""
Deterministic CBOR encoder (RFC 8949 §4.2, via `cbor2` canonical mode).

An alternative `CanonicalEncoder` for off-chain payloads: the value is
wrapped in ``{"type": type_tag, "value": value}`` before encoding, so the
schema name is part of the bytes and two tags can never yield the same
output for one value.

Encoding errors from `cbor2` (unsupported types, floats where forbidden)
propagate unchanged.
"""

from __future__ import annotations

from typing import Any

import cbor2


class CborEncoder:
    """Canonical CBOR with the type tag embedded in the payload."""

    __slots__ = ("allow_floats",)

    def __init__(self, *, allow_floats: bool = False) -> None:
        self.allow_floats = allow_floats

    def _check(self, value: Any) -> None:
        if isinstance(value, float) and not self.allow_floats:
            raise TypeError("floats are not canonical; pass allow_floats=True to permit them")
        if isinstance(value, dict):
            for k, v in value.items():
                self._check(k)
                self._check(v)
        elif isinstance(value, (list, tuple)):
            for v in value:
                self._check(v)

    def serialize(self, type_tag: str, value: Any) -> bytes:
        if not isinstance(type_tag, str) or not type_tag:
            raise ValueError("type_tag must be a non-empty string")
        self._check(value)
        return cbor2.dumps({"type": type_tag, "value": value}, canonical=True)

    def loads(self, data: bytes) -> Any:
        """Decode bytes produced by `serialize`, returning ``(type_tag, value)``."""
        obj = cbor2.loads(data)
        if not isinstance(obj, dict) or set(obj) != {"type", "value"}:
            raise ValueError("not a typed CBOR payload")
        return obj["type"], obj["value"]


__all__ = ["CborEncoder"]
