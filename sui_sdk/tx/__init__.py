"""
Transaction helpers: signing envelopes and digests.
"""

from .digest import compute_transaction_digest, transaction_digest_from_bytes
from .envelope import SigningEnvelope, build_envelope, signature_bytes

__all__ = [
    "SigningEnvelope",
    "build_envelope",
    "signature_bytes",
    "compute_transaction_digest",
    "transaction_digest_from_bytes",
]
