"""
sui_sdk.tx.digest
=================

Transaction digest computation.

    tx_bytes = encoder.serialize("TransactionData", transaction_data)
    digest   = base58( sha3_256( b"TransactionData::" || tx_bytes ) )

The same type tag names the encoding schema *and* prefixes the hash
preimage, so a digest is always bound to a TransactionData-shaped message.

The signing envelope is built (and so validated) on every call, but it is
not part of the hash input: validators identify a transaction by its data
alone, and the same transaction signed by different keys keeps one digest.
"""

from __future__ import annotations

import logging
from typing import Any, Union

from ..constants import TRANSACTION_DATA_TYPE_TAG
from ..crypto.publickey import PublicKey, PublicKeyInitData
from ..crypto.scheme import SchemeLike
from ..digest import encode_transaction_digest
from ..encoding.base import CanonicalEncoder
from ..utils.bytes import BytesLike
from ..utils.hash import hash_typed
from .envelope import SignatureInput, SigningEnvelope

log = logging.getLogger(__name__)

__all__ = [
    "compute_transaction_digest",
    "transaction_digest_from_bytes",
]


def transaction_digest_from_bytes(
    tx_bytes: BytesLike, *, type_tag: str = TRANSACTION_DATA_TYPE_TAG
) -> str:
    """Digest of already-serialized canonical transaction bytes."""
    digest = encode_transaction_digest(hash_typed(type_tag, tx_bytes))
    log.debug(
        "transaction digest computed",
        extra={"type_tag": type_tag, "tx_len": len(bytes(tx_bytes)), "digest": digest},
    )
    return digest


def compute_transaction_digest(
    transaction_data: Any,
    scheme: SchemeLike,
    signature: SignatureInput,
    public_key: Union[PublicKey, PublicKeyInitData],
    encoder: CanonicalEncoder,
    *,
    type_tag: str = TRANSACTION_DATA_TYPE_TAG,
) -> str:
    """
    Generate the transaction digest.

    Parameters
    ----------
    transaction_data : Any
        Structured transaction value understood by `encoder` under `type_tag`.
    scheme : SignatureScheme | str | int
        Signature scheme of `signature`.
    signature : str | bytes
        Signature as base-64 text or raw bytes.
    public_key : PublicKey | PublicKeyInitData
        Signer's key object, or raw init data for `scheme`.
    encoder : CanonicalEncoder
        Produces the canonical bytes; its errors propagate unchanged.

    Returns
    -------
    str
        Base-58 text of the 32-byte digest.
    """
    SigningEnvelope.build(scheme, signature, public_key)
    tx_bytes = encoder.serialize(type_tag, transaction_data)
    return transaction_digest_from_bytes(tx_bytes, type_tag=type_tag)
