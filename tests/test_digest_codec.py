from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sui_sdk.digest import (TX_DIGEST_LENGTH, DigestDecodeResult,
                            decode_transaction_digest,
                            encode_transaction_digest,
                            is_valid_transaction_digest,
                            transaction_digest_to_bytes)
from sui_sdk.errors import DigestError
from sui_sdk.utils.base58 import b58decode, b58encode

# Small leading byte: dropping the last base58 digit then leaves < 32 bytes.
RAW = bytes(range(1, 33))


def test_valid_digest_and_truncated_digest():
    text = encode_transaction_digest(RAW)
    assert is_valid_transaction_digest(text)
    assert not is_valid_transaction_digest(text[:-1])


def test_decode_result_carries_value_or_reason():
    ok = decode_transaction_digest(encode_transaction_digest(RAW))
    assert isinstance(ok, DigestDecodeResult)
    assert ok.ok and ok.value == RAW and ok.error is None

    bad = decode_transaction_digest("0OIl")
    assert not bad.ok
    assert bad.value is None
    assert "base58" in bad.error


@pytest.mark.parametrize("size", [0, 1, 31, 33, 64])
def test_wrong_length_is_invalid(size: int):
    text = b58encode(b"\x07" * size)
    res = decode_transaction_digest(text)
    assert not res.ok
    assert str(size) in res.error
    assert is_valid_transaction_digest(text) is False


@pytest.mark.parametrize("value", ["", "not base58!", "0" * 44, "é" * 44, " " + "1" * 32])
def test_undecodable_text_is_invalid(value: str):
    assert is_valid_transaction_digest(value) is False


@pytest.mark.parametrize("value", [None, 42, RAW])
def test_non_string_is_invalid(value):
    assert is_valid_transaction_digest(value) is False


def test_leading_zero_bytes_survive():
    raw = b"\x00\x00" + RAW[2:]
    text = encode_transaction_digest(raw)
    assert text.startswith("11")
    assert transaction_digest_to_bytes(text) == raw


def test_strict_helpers_raise_digest_error():
    with pytest.raises(DigestError):
        encode_transaction_digest(b"\x01" * 31)
    with pytest.raises(DigestError) as ei:
        transaction_digest_to_bytes("abc")
    assert ei.value.value == "abc"
    assert isinstance(ei.value, ValueError)


@given(st.binary(max_size=96))
def test_base58_roundtrip(raw: bytes):
    assert b58decode(b58encode(raw)) == raw


@given(st.binary(min_size=TX_DIGEST_LENGTH, max_size=TX_DIGEST_LENGTH))
def test_digest_roundtrip(raw: bytes):
    text = encode_transaction_digest(raw)
    assert is_valid_transaction_digest(text)
    assert transaction_digest_to_bytes(text) == raw
