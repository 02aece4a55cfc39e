from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Callable

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, ed25519
from cryptography.hazmat.primitives.asymmetric.utils import \
    decode_dss_signature
from cryptography.hazmat.primitives.serialization import (Encoding,
                                                          PublicFormat)


@dataclass(frozen=True)
class KeyFixture:
    scheme: str
    public_key: bytes
    sign: Callable[[bytes], bytes]

    @property
    def public_key_b64(self) -> str:
        return base64.b64encode(self.public_key).decode("ascii")


def _ed25519_key(seed: bytes) -> KeyFixture:
    priv = ed25519.Ed25519PrivateKey.from_private_bytes(seed)
    pub = priv.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    return KeyFixture("ED25519", pub, priv.sign)


def _secp256k1_key(secret: int) -> KeyFixture:
    priv = ec.derive_private_key(secret, ec.SECP256K1())
    pub = priv.public_key().public_bytes(Encoding.X962, PublicFormat.CompressedPoint)

    def sign(msg: bytes) -> bytes:
        r, s = decode_dss_signature(priv.sign(msg, ec.ECDSA(hashes.SHA256())))
        return r.to_bytes(32, "big") + s.to_bytes(32, "big")

    return KeyFixture("Secp256k1", pub, sign)


@pytest.fixture
def ed25519_key() -> KeyFixture:
    # Deterministic test seed: 0x00, 0x01, ..., 0x1f
    return _ed25519_key(bytes(range(32)))


@pytest.fixture
def secp256k1_key() -> KeyFixture:
    return _secp256k1_key(0x1F2E3D4C5B6A79880123456789ABCDEF)


@pytest.fixture
def sample_tx() -> dict:
    """A TransferObject transaction in the shape `default_bcs()` encodes."""
    return {
        "kind": {
            "Single": {
                "TransferObject": {
                    "recipient": "0xc2b5625c221264078310a084df0a3137956d20ee",
                    "object_ref": {
                        "objectId": "0x5d3a",
                        "version": 3,
                        "digest": base64.b64encode(bytes(range(32))).decode("ascii"),
                    },
                }
            }
        },
        "sender": "0xABC",
        "gasPayment": {
            "objectId": "0x0000000000000000000000000000000000000005",
            "version": 7,
            "digest": bytes([0xAA]) * 32,
        },
        "gasPrice": 1,
        "gasBudget": 1000,
    }


@pytest.fixture
def sdk_logger():
    """Remove handlers installed by `sui_sdk.logging.configure` after the test."""
    logger = logging.getLogger("sui_sdk")
    before = list(logger.handlers)
    level = logger.level
    yield logger
    for h in list(logger.handlers):
        if h not in before:
            logger.removeHandler(h)
    logger.setLevel(level)
