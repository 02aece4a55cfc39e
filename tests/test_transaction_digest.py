from __future__ import annotations

import copy
import hashlib

import base58
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sui_sdk.digest import is_valid_transaction_digest, transaction_digest_to_bytes
from sui_sdk.encoding import CborEncoder, default_bcs
from sui_sdk.errors import (Base64DecodeError, BcsEncodeError, PublicKeyError,
                            UnsupportedSchemeError)
from sui_sdk.tx import compute_transaction_digest, transaction_digest_from_bytes
from sui_sdk.utils.hash import hash_typed


class RecordingEncoder:
    def __init__(self, payload: bytes = b"\x01\x02\x03") -> None:
        self.payload = payload
        self.calls = []

    def serialize(self, type_tag, value):
        self.calls.append((type_tag, value))
        return self.payload


class FailingEncoder:
    def serialize(self, type_tag, value):
        raise RuntimeError("encoder exploded")


def _digest(tx, key, encoder=None, **kw):
    return compute_transaction_digest(
        tx, key.scheme, key.sign(b"any"), key.public_key, encoder or default_bcs(), **kw
    )


def test_digest_is_base58_of_typed_sha3(sample_tx, ed25519_key):
    tx_bytes = default_bcs().ser("TransactionData", sample_tx)
    expected = base58.b58encode(
        hashlib.sha3_256(b"TransactionData::" + tx_bytes).digest()
    ).decode("ascii")
    assert _digest(sample_tx, ed25519_key) == expected
    assert transaction_digest_from_bytes(tx_bytes) == expected
    assert is_valid_transaction_digest(expected)


def test_digest_is_deterministic(sample_tx, ed25519_key):
    assert _digest(sample_tx, ed25519_key) == _digest(copy.deepcopy(sample_tx), ed25519_key)


def test_digest_ignores_the_signer(sample_tx, ed25519_key, secp256k1_key):
    # Same transaction data, different envelopes: one digest.
    assert _digest(sample_tx, ed25519_key) == _digest(sample_tx, secp256k1_key)


def test_digest_tracks_transaction_fields(sample_tx, ed25519_key):
    base = _digest(sample_tx, ed25519_key)
    changed = copy.deepcopy(sample_tx)
    changed["gasBudget"] += 1
    assert _digest(changed, ed25519_key) != base
    changed = copy.deepcopy(sample_tx)
    changed["sender"] = "0xABD"
    assert _digest(changed, ed25519_key) != base


def test_short_and_long_sender_forms_agree(sample_tx, ed25519_key):
    long_form = copy.deepcopy(sample_tx)
    long_form["sender"] = "0x0000000000000000000000000000000000000abc"
    assert _digest(long_form, ed25519_key) == _digest(sample_tx, ed25519_key)


@settings(max_examples=50)
@given(st.binary(min_size=1, max_size=256), st.data())
def test_any_byte_flip_changes_the_digest(tx_bytes, data):
    i = data.draw(st.integers(min_value=0, max_value=len(tx_bytes) - 1))
    flipped = bytearray(tx_bytes)
    flipped[i] ^= 0x01
    assert transaction_digest_from_bytes(tx_bytes) != transaction_digest_from_bytes(flipped)


@given(st.binary(max_size=128))
def test_digest_always_decodes_to_32_bytes(tx_bytes):
    digest = transaction_digest_from_bytes(tx_bytes)
    assert transaction_digest_to_bytes(digest) == hashlib.sha3_256(
        b"TransactionData::" + tx_bytes
    ).digest()


def test_encoder_sees_the_type_tag(ed25519_key):
    enc = RecordingEncoder()
    value = {"opaque": True}
    _digest(value, ed25519_key, encoder=enc)
    assert enc.calls == [("TransactionData", value)]


def test_custom_type_tag_changes_the_digest(ed25519_key):
    enc = RecordingEncoder()
    a = _digest({}, ed25519_key, encoder=enc)
    b = _digest({}, ed25519_key, encoder=enc, type_tag="TransactionEffects")
    assert a != b
    assert enc.calls[-1][0] == "TransactionEffects"


@pytest.mark.parametrize("tag", ["", "Tx::Data", "Trañsaction", "A:", ":A", "Tx:Data"])
def test_bad_type_tags(tag):
    with pytest.raises(ValueError):
        transaction_digest_from_bytes(b"\x00", type_tag=tag)


def test_tag_and_data_cannot_trade_colons():
    # "A:" + "::" + ":x" and "A" + "::" + "::x" would both hash "A:::x".
    with pytest.raises(ValueError):
        hash_typed("A:", b":x")
    assert hash_typed("A", b"::x") != hash_typed("A", b":x")


def test_cbor_encoder_can_back_the_digest(ed25519_key):
    value = {"kind": "transfer", "amount": 5}
    payload = CborEncoder().serialize("TransactionData", value)
    assert _digest(value, ed25519_key, encoder=CborEncoder()) == transaction_digest_from_bytes(payload)


def test_encoder_errors_propagate_unchanged(sample_tx, ed25519_key):
    del sample_tx["gasPrice"]
    with pytest.raises(BcsEncodeError):
        _digest(sample_tx, ed25519_key)
    with pytest.raises(RuntimeError, match="encoder exploded"):
        _digest(sample_tx, ed25519_key, encoder=FailingEncoder())


def test_envelope_is_validated_before_encoding(sample_tx, ed25519_key, secp256k1_key):
    enc = RecordingEncoder()
    sig = ed25519_key.sign(b"m")
    with pytest.raises(UnsupportedSchemeError):
        compute_transaction_digest(sample_tx, "BLS12381", sig, ed25519_key.public_key, enc)
    with pytest.raises(Base64DecodeError):
        compute_transaction_digest(sample_tx, "ED25519", "%%%", ed25519_key.public_key, enc)
    with pytest.raises(PublicKeyError):
        compute_transaction_digest(sample_tx, "ED25519", sig, secp256k1_key.public_key, enc)
    assert enc.calls == []
