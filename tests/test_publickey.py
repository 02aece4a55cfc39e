from __future__ import annotations

import base64
import hashlib

import pytest

from sui_sdk.address import is_valid_sui_address
from sui_sdk.crypto import (SIGNATURE_FLAG_TO_SCHEME,
                            SIGNATURE_SCHEME_TO_FLAG, Ed25519PublicKey, PublicKey,
                            Secp256k1PublicKey, SignatureScheme,
                            public_key_for_scheme, resolve_scheme)
from sui_sdk.errors import (Base64DecodeError, PublicKeyError,
                            UnsupportedSchemeError)


def test_scheme_table():
    assert SIGNATURE_SCHEME_TO_FLAG == {
        SignatureScheme.ED25519: 0x00,
        SignatureScheme.SECP256K1: 0x01,
    }
    assert SIGNATURE_FLAG_TO_SCHEME[1] is SignatureScheme.SECP256K1
    assert SignatureScheme.ED25519.public_key_size == 32
    assert SignatureScheme.SECP256K1.public_key_size == 33


@pytest.mark.parametrize(
    "value,expected",
    [
        ("ED25519", SignatureScheme.ED25519),
        ("ed25519", SignatureScheme.ED25519),
        ("Secp256k1", SignatureScheme.SECP256K1),
        ("SECP256K1", SignatureScheme.SECP256K1),
        (0, SignatureScheme.ED25519),
        (1, SignatureScheme.SECP256K1),
        (SignatureScheme.SECP256K1, SignatureScheme.SECP256K1),
    ],
)
def test_resolve_scheme(value, expected):
    assert resolve_scheme(value) is expected


@pytest.mark.parametrize("value", ["BLS12381", "", 2, -1, True, None, 1.0])
def test_resolve_scheme_rejects_everything_else(value):
    with pytest.raises(UnsupportedSchemeError):
        resolve_scheme(value)


def test_init_data_shapes_agree(ed25519_key):
    raw = ed25519_key.public_key
    from_b64 = Ed25519PublicKey(ed25519_key.public_key_b64)
    from_bytes = Ed25519PublicKey(bytearray(raw))
    from_list = Ed25519PublicKey(list(raw))
    assert from_b64 == from_bytes == from_list
    assert from_b64.to_bytes() == raw
    assert from_b64.to_base64() == ed25519_key.public_key_b64
    assert hash(from_b64) == hash(from_list)


def test_wrong_size_is_rejected(ed25519_key, secp256k1_key):
    with pytest.raises(PublicKeyError):
        Ed25519PublicKey(secp256k1_key.public_key)
    with pytest.raises(PublicKeyError):
        Secp256k1PublicKey(ed25519_key.public_key)
    with pytest.raises(PublicKeyError):
        Ed25519PublicKey([256] * 32)


def test_malformed_base64_key_is_an_error():
    with pytest.raises(Base64DecodeError):
        Ed25519PublicKey("not*base64")


def test_keys_of_different_schemes_are_never_equal(ed25519_key):
    k = Ed25519PublicKey(ed25519_key.public_key)
    assert not k.equals(object())  # type: ignore[arg-type]
    assert k != ed25519_key.public_key


def test_sui_address_derivation(ed25519_key, secp256k1_key):
    k = Ed25519PublicKey(ed25519_key.public_key)
    expected = "0x" + hashlib.sha3_256(b"\x00" + ed25519_key.public_key).hexdigest()[:40]
    assert k.to_sui_address() == expected
    assert is_valid_sui_address(k.to_sui_address())

    s = Secp256k1PublicKey(secp256k1_key.public_key)
    expected = "0x" + hashlib.sha3_256(b"\x01" + secp256k1_key.public_key).hexdigest()[:40]
    assert s.to_sui_address() == expected


def test_verify_ed25519(ed25519_key):
    k = Ed25519PublicKey(ed25519_key.public_key)
    msg = b"sui test message"
    sig = ed25519_key.sign(msg)
    assert k.verify(msg, sig) is True
    assert k.verify(b"tampered", sig) is False
    assert k.verify(msg, sig[:-1]) is False


def test_verify_secp256k1(secp256k1_key):
    k = Secp256k1PublicKey(secp256k1_key.public_key)
    msg = b"sui test message"
    sig = secp256k1_key.sign(msg)
    assert len(sig) == 64
    assert k.verify(msg, sig) is True
    assert k.verify(b"tampered", sig) is False


def test_secp256k1_invalid_point_surfaces_on_verify():
    k = Secp256k1PublicKey(b"\x05" + b"\x11" * 32)
    with pytest.raises(PublicKeyError):
        k.verify(b"m", b"\x01" * 64)


def test_public_key_for_scheme_dispatch(ed25519_key, secp256k1_key):
    obj = Ed25519PublicKey(ed25519_key.public_key)
    assert public_key_for_scheme("ED25519", obj) is obj
    built = public_key_for_scheme(SignatureScheme.SECP256K1, secp256k1_key.public_key)
    assert isinstance(built, Secp256k1PublicKey)
    with pytest.raises(UnsupportedSchemeError):
        public_key_for_scheme("Secp256k1", obj)
    with pytest.raises(UnsupportedSchemeError):
        public_key_for_scheme("BLS12381", ed25519_key.public_key)


def test_base64_text_is_the_wire_form(secp256k1_key):
    text = base64.b64encode(secp256k1_key.public_key).decode()
    assert Secp256k1PublicKey(text).to_bytes() == secp256k1_key.public_key


def test_base_class_is_abstract(ed25519_key):
    with pytest.raises(TypeError):
        PublicKey(ed25519_key.public_key)  # type: ignore[abstract]
