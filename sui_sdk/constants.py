"""
Protocol-wide constants shared by the codecs.

Sources of truth (kept in sync with the node's base types):
- addresses use the Move account address length (20 bytes);
- transaction digests are 32-byte SHA3-256 outputs.
"""

from __future__ import annotations

SUI_ADDRESS_LENGTH: int = 20
TX_DIGEST_LENGTH: int = 32

# Schema name under which transaction data is encoded *and* hashed.
TRANSACTION_DATA_TYPE_TAG: str = "TransactionData"

# Joins the type tag and the canonical bytes in the hash preimage.
HASH_TAG_SEPARATOR: str = "::"

ADDRESS_PREFIX: str = "0x"

__all__ = [
    "SUI_ADDRESS_LENGTH",
    "TX_DIGEST_LENGTH",
    "TRANSACTION_DATA_TYPE_TAG",
    "HASH_TAG_SEPARATOR",
    "ADDRESS_PREFIX",
]
