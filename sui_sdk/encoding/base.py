from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CanonicalEncoder(Protocol):
    """
    Anything that turns a structured value into deterministic bytes under a
    named schema.

    Equal values under the same `type_tag` must always give identical bytes;
    failures (unknown schema, value/schema mismatch) are raised to the caller.
    """

    def serialize(self, type_tag: str, value: Any) -> bytes: ...


__all__ = ["CanonicalEncoder"]
