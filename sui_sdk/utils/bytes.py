"""
Byte helpers shared by the codecs: the bytes-like alias, hex rendering and
the ULEB128 varint BCS uses for lengths and enum variant indices.
"""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

# BCS caps sequence lengths and variant indices at u32.
ULEB128_MAX = 0xFFFFFFFF


def to_hex(b: BytesLike, prefix: bool = True) -> str:
    """Lowercase hex, ``0x``-prefixed unless `prefix` is false."""
    s = bytes(b).hex()
    return f"0x{s}" if prefix else s


def uleb128_encode(n: int) -> bytes:
    """
    Unsigned LEB128: seven bits per byte, low group first, high bit set on
    every byte but the last.

        0   -> b'\\x00'
        127 -> b'\\x7f'
        128 -> b'\\x80\\x01'
    """
    if n < 0 or n > ULEB128_MAX:
        raise ValueError(f"uleb128 value out of u32 range: {n}")
    out = bytearray()
    while n >= 0x80:
        out.append((n & 0x7F) | 0x80)
        n >>= 7
    out.append(n)
    return bytes(out)


__all__ = ["BytesLike", "ULEB128_MAX", "to_hex", "uleb128_encode"]
