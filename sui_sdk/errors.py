"""
Typed error classes for the Python SDK.

These are raised by the address/digest codecs, the public-key constructors,
the envelope builder and the BCS encoder so callers can catch specific
failure modes while still being able to catch the base `SuiSdkError`.

Most classes also derive from the builtin exception a plain-Python caller
would expect (`ValueError` for malformed input, `TypeError` for schema
mismatches) so existing ``except ValueError`` blocks keep working.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "SuiSdkError",
    "AddressError",
    "DigestError",
    "Base64DecodeError",
    "UnsupportedSchemeError",
    "PublicKeyError",
    "EnvelopeError",
    "BcsEncodeError",
]


class SuiSdkError(Exception):
    """Base class for all SDK errors."""


class AddressError(SuiSdkError, ValueError):
    """Raised for malformed addresses / object ids on the strict decode paths."""


@dataclass(eq=False)
class DigestError(SuiSdkError, ValueError):
    """
    Raised when a transaction digest cannot be encoded or decoded.

    Fields:
      - reason: human-readable failure description
      - value: the offending input (text or raw bytes), if available
    """

    reason: str
    value: Optional[Any] = None

    def __post_init__(self) -> None:
        super().__init__(self.reason)

    def __str__(self) -> str:  # pragma: no cover - trivial
        if self.value is None:
            return f"DigestError: {self.reason}"
        return f"DigestError: {self.reason} (value={self.value!r})"


class Base64DecodeError(SuiSdkError, ValueError):
    """Raised when base-64 text (signatures, public keys, envelopes) is malformed."""


@dataclass(eq=False)
class UnsupportedSchemeError(SuiSdkError, ValueError):
    """
    Raised when a signature scheme falls outside the supported set, or when a
    public key object belongs to a different scheme than the one requested.
    """

    scheme: Any
    message: str = "unsupported signature scheme"

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.message}: {self.scheme!r}"


class PublicKeyError(SuiSdkError, ValueError):
    """Raised when public key material has the wrong size or shape."""


class EnvelopeError(SuiSdkError, ValueError):
    """Raised when a serialized signing envelope cannot be parsed."""


@dataclass(eq=False)
class BcsEncodeError(SuiSdkError, TypeError):
    """
    Raised when a value does not match the BCS schema it is serialized under.

    Fields:
      - message: what went wrong
      - type_name: schema/type being encoded when the failure happened
      - path: dotted field path inside the value (empty at the top level)
    """

    message: str
    type_name: Optional[str] = None
    path: str = ""

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover - trivial
        where = []
        if self.type_name:
            where.append(f"type={self.type_name}")
        if self.path:
            where.append(f"at={self.path}")
        where_s = (" [" + ", ".join(where) + "]") if where else ""
        return f"BcsEncodeError{where_s}: {self.message}"
