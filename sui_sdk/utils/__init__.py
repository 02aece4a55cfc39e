"""
Utility helpers for the Python SDK.

Re-exports:
- bytes: hex rendering and uleb128 encoding
- base58 / base64: text codecs for digests, signatures and keys
- hash: SHA3-256 and the type-tagged hash used for transaction digests
"""

from .base58 import b58decode, b58encode
from .base64 import b64decode, b64encode
from .bytes import to_hex, uleb128_encode
from .hash import hash_typed, sha3_256

__all__ = [
    # bytes
    "to_hex",
    "uleb128_encode",
    # text codecs
    "b58encode",
    "b58decode",
    "b64encode",
    "b64decode",
    # hash
    "sha3_256",
    "hash_typed",
]
