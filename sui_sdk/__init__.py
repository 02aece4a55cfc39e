"""
Sui Python SDK: identifier canonicalization and transaction digests.
Convenience exports for the most common client APIs.
"""

from .version import __version__  # noqa: F401

# Constants, config & errors
from .constants import SUI_ADDRESS_LENGTH, TX_DIGEST_LENGTH  # noqa: F401
from .config import SDKConfig  # noqa: F401
from .errors import (  # noqa: F401
    SuiSdkError,
    AddressError,
    DigestError,
    Base64DecodeError,
    UnsupportedSchemeError,
    PublicKeyError,
    EnvelopeError,
    BcsEncodeError,
)

# Identifiers
from .address import (  # noqa: F401
    normalize_sui_address,
    normalize_sui_object_id,
    is_valid_sui_address,
    is_valid_sui_object_id,
)

# Digests
from .digest import (  # noqa: F401
    DigestDecodeResult,
    decode_transaction_digest,
    is_valid_transaction_digest,
    encode_transaction_digest,
)

# Keys & schemes
from .crypto import (  # noqa: F401
    SignatureScheme,
    PublicKey,
    Ed25519PublicKey,
    Secp256k1PublicKey,
)

# Encoders
from .encoding import BCS, CborEncoder, default_bcs  # noqa: F401

# Tx helpers
from .tx import (  # noqa: F401
    SigningEnvelope,
    build_envelope,
    compute_transaction_digest,
    transaction_digest_from_bytes,
)

__all__ = [
    "__version__",
    # Core
    "SUI_ADDRESS_LENGTH", "TX_DIGEST_LENGTH", "SDKConfig",
    "SuiSdkError", "AddressError", "DigestError", "Base64DecodeError",
    "UnsupportedSchemeError", "PublicKeyError", "EnvelopeError", "BcsEncodeError",
    # Identifiers
    "normalize_sui_address", "normalize_sui_object_id",
    "is_valid_sui_address", "is_valid_sui_object_id",
    # Digests
    "DigestDecodeResult", "decode_transaction_digest",
    "is_valid_transaction_digest", "encode_transaction_digest",
    # Keys
    "SignatureScheme", "PublicKey", "Ed25519PublicKey", "Secp256k1PublicKey",
    # Encoders
    "BCS", "CborEncoder", "default_bcs",
    # Tx
    "SigningEnvelope", "build_envelope",
    "compute_transaction_digest", "transaction_digest_from_bytes",
]
