"""
Canonical encoders for transaction data.

- :class:`CanonicalEncoder` — the protocol digest computation depends on
- :class:`BCS` / :func:`default_bcs` — Binary Canonical Serialization
- :class:`CborEncoder` — deterministic CBOR for off-chain payloads
"""

from .base import CanonicalEncoder
from .bcs import BCS, default_bcs, parse_type_tag
from .cbor import CborEncoder

__all__ = ["CanonicalEncoder", "BCS", "default_bcs", "parse_type_tag", "CborEncoder"]
