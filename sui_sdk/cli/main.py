"""
sui_sdk.cli.main
================

`sui-sdk` — offline helpers for identifiers, digests and signing envelopes.
Nothing here talks to a node.

Examples
--------
    $ sui-sdk normalize ABC
    0x0000000000000000000000000000000000000abc
    $ sui-sdk validate-address 0xc2b5625c221264078310a084df0a3137956d20ee
    $ sui-sdk validate-digest 3xGvS1Z...
    $ sui-sdk envelope --scheme ED25519 --signature <b64> --public-key <b64>
    $ sui-sdk tx-digest <tx-bytes-b64>

Configuration
-------------
- Log level     : `--log-level` or env `SUI_SDK_LOG_LEVEL` (default: WARNING)
- JSON logs     : `--json-logs` or env `SUI_SDK_LOG_JSON`
- Scheme        : `--scheme` or env `SUI_SDK_SCHEME` (default: ED25519)
- Hash type tag : `--type-tag` or env `SUI_SDK_TYPE_TAG` (default: TransactionData)
"""

from __future__ import annotations

import json
from typing import Any, Optional

import typer

from .. import logging as slog
from ..address import is_valid_sui_address, normalize_sui_address
from ..config import SDKConfig
from ..digest import decode_transaction_digest
from ..errors import SuiSdkError
from ..tx.digest import transaction_digest_from_bytes
from ..tx.envelope import SigningEnvelope
from ..utils.base64 import b64decode
from ..version import version as sdk_version

app = typer.Typer(
    name="sui-sdk",
    help="Sui SDK CLI: canonicalize identifiers and compute transaction digests.",
    no_args_is_help=True,
    add_completion=False,
)

__all__ = ["app", "main"]


def _print_json(obj: Any) -> None:
    typer.echo(json.dumps(obj, indent=2, ensure_ascii=False))


def _fail(msg: str, code: int = 2) -> None:
    typer.echo(f"error: {msg}", err=True)
    raise typer.Exit(code=code)


def _cfg(ctx: typer.Context) -> SDKConfig:
    return ctx.obj


@app.callback()
def _root(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level."),
    json_logs: Optional[bool] = typer.Option(
        None, "--json-logs/--text-logs", help="Emit logs as JSON lines."
    ),
) -> None:
    """Resolve configuration (flags over SUI_SDK_* env) and set up logging."""
    try:
        cfg = SDKConfig.with_overrides(
            SDKConfig.from_env(), log_level=log_level, log_json=json_logs
        )
    except (ValueError, SuiSdkError) as e:
        _fail(f"bad configuration: {e}")
    slog.configure(json=cfg.log_json, level=cfg.log_level)
    ctx.obj = cfg


@app.command("version")
def cmd_version() -> None:
    """Print SDK version."""
    typer.echo(sdk_version())


@app.command("normalize")
def cmd_normalize(
    value: str = typer.Argument(..., help="Address or object id (any case, prefix optional)."),
    force_add_0x: bool = typer.Option(
        False, "--force-add-0x", help="Keep a leading 0x as part of the value."
    ),
) -> None:
    """Print the canonical 0x-prefixed, zero-padded, lowercase form."""
    typer.echo(normalize_sui_address(value, force_add_0x))


@app.command("validate-address")
def cmd_validate_address(value: str = typer.Argument(...)) -> None:
    """Exit 0 if VALUE is a full-length hex address, 1 otherwise."""
    ok = is_valid_sui_address(value)
    typer.echo("valid" if ok else "invalid")
    if not ok:
        raise typer.Exit(code=1)


@app.command("validate-digest")
def cmd_validate_digest(value: str = typer.Argument(...)) -> None:
    """Report whether VALUE is a base-58 32-byte digest (exit 1 if not)."""
    res = decode_transaction_digest(value)
    _print_json({"valid": res.ok, "error": res.error})
    if not res.ok:
        raise typer.Exit(code=1)


@app.command("envelope")
def cmd_envelope(
    ctx: typer.Context,
    signature: str = typer.Option(..., "--signature", help="Signature (base64)."),
    public_key: str = typer.Option(..., "--public-key", help="Public key (base64)."),
    scheme: Optional[str] = typer.Option(None, "--scheme", help="ED25519 or Secp256k1."),
) -> None:
    """Print the serialized signature envelope (base64) and signer address."""
    try:
        env = SigningEnvelope.build(
            scheme or _cfg(ctx).default_scheme, signature, public_key
        )
    except SuiSdkError as e:
        _fail(str(e))
    _print_json(
        {
            "scheme": env.scheme.value,
            "envelope": env.to_base64(),
            "length": len(env),
            "address": env.public_key.to_sui_address(),
        }
    )


@app.command("tx-digest")
def cmd_tx_digest(
    ctx: typer.Context,
    tx_bytes: str = typer.Argument(..., help="Canonical transaction bytes (base64)."),
    type_tag: Optional[str] = typer.Option(None, "--type-tag", help="Schema name for the hash."),
    signature: Optional[str] = typer.Option(None, "--signature", help="Check this signature envelope too."),
    public_key: Optional[str] = typer.Option(None, "--public-key"),
    scheme: Optional[str] = typer.Option(None, "--scheme"),
) -> None:
    """Print the base-58 digest of already-serialized transaction bytes."""
    cfg = _cfg(ctx)
    try:
        if signature is not None or public_key is not None:
            if signature is None or public_key is None:
                _fail("--signature and --public-key must be given together")
            SigningEnvelope.build(scheme or cfg.default_scheme, signature, public_key)
        raw = b64decode(tx_bytes)
        digest = transaction_digest_from_bytes(raw, type_tag=type_tag or cfg.type_tag)
    except (SuiSdkError, ValueError) as e:
        _fail(str(e))
    typer.echo(digest)


def main() -> None:  # pragma: no cover - thin wrapper
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
