from __future__ import annotations

import io
import json
import logging

import pytest

from sui_sdk import logging as slog
from sui_sdk.tx import build_envelope, transaction_digest_from_bytes


@pytest.fixture(autouse=True)
def _fresh_context():
    slog.clear_context()
    yield
    slog.clear_context()


def _lines(buf: io.StringIO):
    return [json.loads(line) for line in buf.getvalue().splitlines() if line]


def test_json_records_carry_extras_and_context(sdk_logger):
    buf = io.StringIO()
    slog.configure(json=True, level="DEBUG", stream=buf)
    with slog.trace_scope("t-123"):
        slog.bind(component="wallet")
        digest = transaction_digest_from_bytes(b"\x01\x02")
    [rec] = _lines(buf)
    assert rec["level"] == "DEBUG"
    assert rec["logger"] == "sui_sdk.tx.digest"
    assert rec["digest"] == digest
    assert rec["tx_len"] == 2
    assert rec["trace_id"] == "t-123"
    assert rec["component"] == "wallet"
    assert slog.context() == {}


def test_envelope_build_is_logged(sdk_logger, ed25519_key):
    buf = io.StringIO()
    slog.configure(json=True, level="DEBUG", stream=buf)
    build_envelope("ED25519", b"\x00" * 64, ed25519_key.public_key)
    [rec] = _lines(buf)
    assert rec["scheme"] == "ED25519"
    assert rec["env_len"] == 97


def test_level_filters_debug_records(sdk_logger):
    buf = io.StringIO()
    slog.configure(json=True, level="WARNING", stream=buf)
    transaction_digest_from_bytes(b"\x01")
    assert buf.getvalue() == ""


def test_reconfigure_replaces_handler(sdk_logger):
    slog.configure(stream=io.StringIO())
    buf = io.StringIO()
    logger = slog.configure(json=False, level="INFO", stream=buf)
    marked = [h for h in logger.handlers if getattr(h, "_sui_sdk_handler", False)]
    assert len(marked) == 1
    slog.get_logger("sui_sdk.test").info("hello", extra={"raw": b"\xab"})
    line = buf.getvalue().strip()
    assert "| sui_sdk.test |" in line
    assert "raw=ab" in line
    assert line.endswith("| hello")


def test_unknown_level_is_rejected(sdk_logger):
    with pytest.raises(ValueError):
        slog.configure(level="LOUD", stream=io.StringIO())


def test_library_installs_no_handlers():
    # Importing and using the SDK must not add handlers of its own.
    logger = logging.getLogger("sui_sdk")
    before = list(logger.handlers)
    transaction_digest_from_bytes(b"\x00")
    assert logger.handlers == before
