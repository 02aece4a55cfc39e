"""
sui_sdk.address
===============

Canonicalization and validation of on-chain identifiers.

Format
------
Addresses and object ids share one namespace and one representation: a
fixed-length byte string (``SUI_ADDRESS_LENGTH`` = 20 bytes) whose canonical
text form is ``0x`` followed by 40 lowercase hex characters, zero-padded on
the left.

This module provides:
- normalize_sui_address(value, force_add_0x=False) -> str
- normalize_sui_object_id(value, force_add_0x=False) -> str
- is_valid_sui_address(value) -> bool
- is_valid_sui_object_id(value) -> bool
- address_to_bytes(value) -> bytes       (strict; raises AddressError)
- address_from_bytes(raw) -> str         (strict; raises AddressError)

Normalization is a *formatter*, not a validator: it never raises and never
rejects non-hex input. Pair it with `is_valid_sui_address` when the input is
untrusted.
"""

from __future__ import annotations

import re

from .constants import ADDRESS_PREFIX, SUI_ADDRESS_LENGTH
from .errors import AddressError
from .utils.bytes import BytesLike

__all__ = [
    "SUI_ADDRESS_LENGTH",
    "normalize_sui_address",
    "normalize_sui_object_id",
    "is_valid_sui_address",
    "is_valid_sui_object_id",
    "address_to_bytes",
    "address_from_bytes",
    "AddressError",
]

_HEX_RE = re.compile(r"(0x|0X)?[a-fA-F0-9]+")


def _is_hex(value: str) -> bool:
    return bool(_HEX_RE.fullmatch(value)) and len(value) % 2 == 0


def _hex_byte_length(value: str) -> int:
    if value[:2] in ("0x", "0X"):
        return (len(value) - 2) // 2
    return len(value) // 2


def normalize_sui_address(value: str, force_add_0x: bool = False) -> str:
    """
    Canonical text form of an address.

    1. lower-case the value;
    2. strip a leading ``0x`` unless `force_add_0x` is set;
    3. left-pad with ``0`` up to ``2 * SUI_ADDRESS_LENGTH`` characters;
    4. prepend ``0x``.

    WARNING: if the address value itself starts with ``0x`` (e.g. ``0x0x...``),
    the first ``0x`` is treated as a prefix and dropped. Pass
    ``force_add_0x=True`` when the caller knows the value carries no prefix;
    nothing is stripped then.
    """
    address = value.lower()
    if not force_add_0x and address.startswith(ADDRESS_PREFIX):
        address = address[len(ADDRESS_PREFIX):]
    return ADDRESS_PREFIX + address.rjust(SUI_ADDRESS_LENGTH * 2, "0")


def normalize_sui_object_id(value: str, force_add_0x: bool = False) -> str:
    """Object ids follow the address rules exactly."""
    return normalize_sui_address(value, force_add_0x)


def is_valid_sui_address(value: object) -> bool:
    """True iff `value` is hex (optional 0x prefix) of exactly 20 bytes."""
    if not isinstance(value, str):
        return False
    return _is_hex(value) and _hex_byte_length(value) == SUI_ADDRESS_LENGTH


def is_valid_sui_object_id(value: object) -> bool:
    return is_valid_sui_address(value)


def address_to_bytes(value: str) -> bytes:
    """
    Decode a *full-length* address into its raw bytes.

    Short forms must be normalized first; this function does not pad.
    """
    if not is_valid_sui_address(value):
        raise AddressError(
            f"not a {SUI_ADDRESS_LENGTH}-byte hex address: {value!r}"
        )
    if value[:2] in ("0x", "0X"):
        value = value[2:]
    return bytes.fromhex(value)


def address_from_bytes(raw: BytesLike) -> str:
    raw = bytes(raw)
    if len(raw) != SUI_ADDRESS_LENGTH:
        raise AddressError(
            f"address must be {SUI_ADDRESS_LENGTH} bytes, got {len(raw)}"
        )
    return ADDRESS_PREFIX + raw.hex()
