"""
SDK configuration: logging, default signature scheme and hash type tag.

- Loads sane defaults and supports overrides via environment variables (SUI_SDK_*).
- Protocol constants (address/digest lengths) are *not* configurable; they
  live in :mod:`sui_sdk.constants`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .constants import TRANSACTION_DATA_TYPE_TAG
from .crypto.scheme import SignatureScheme, resolve_scheme
from .utils.hash import check_type_tag

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v is not None else default


def _parse_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _TRUTHY:
        return True
    if s in _FALSY:
        return False
    raise ValueError(f"not a boolean: {val!r}")


def _parse_level(val: Any) -> str:
    s = str(val).strip().upper()
    if s not in _LOG_LEVELS:
        raise ValueError(f"unknown log level: {val!r}")
    return s


def _parse_type_tag(val: Any) -> str:
    try:
        return check_type_tag(str(val).strip())
    except ValueError as e:
        raise ValueError(f"invalid type tag {val!r}: {e}") from e


@dataclass(slots=True)
class SDKConfig:
    log_level: str = "WARNING"
    log_json: bool = False
    default_scheme: SignatureScheme = SignatureScheme.ED25519
    type_tag: str = field(default=TRANSACTION_DATA_TYPE_TAG)

    @classmethod
    def from_env(cls, prefix: str = "SUI_SDK_") -> "SDKConfig":
        """
        Create config from environment variables:

        SUI_SDK_LOG_LEVEL     (DEBUG/INFO/WARNING/...)
        SUI_SDK_LOG_JSON      (1/0, true/false)
        SUI_SDK_SCHEME        (ED25519 | Secp256k1)
        SUI_SDK_TYPE_TAG      (schema name used for digests)
        """
        return cls(
            log_level=_parse_level(_env(f"{prefix}LOG_LEVEL", "WARNING")),
            log_json=_parse_bool(_env(f"{prefix}LOG_JSON", "0")),
            default_scheme=resolve_scheme(_env(f"{prefix}SCHEME", SignatureScheme.ED25519.value) or ""),
            type_tag=_parse_type_tag(_env(f"{prefix}TYPE_TAG", TRANSACTION_DATA_TYPE_TAG)),
        )

    @classmethod
    def with_overrides(
        cls, base: Optional["SDKConfig"] = None, **overrides: Any
    ) -> "SDKConfig":
        """
        Build from an existing config plus keyword overrides.
        Unknown keys are ignored; `None` values keep the base value.
        """
        base = base or cls.from_env()
        known = {k: v for k, v in overrides.items() if k in cls.__dataclass_fields__ and v is not None}
        return cls(
            log_level=_parse_level(known.get("log_level", base.log_level)),
            log_json=_parse_bool(known.get("log_json", base.log_json)),
            default_scheme=resolve_scheme(known.get("default_scheme", base.default_scheme)),
            type_tag=_parse_type_tag(known.get("type_tag", base.type_tag)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "log_level": self.log_level,
            "log_json": bool(self.log_json),
            "default_scheme": self.default_scheme.value,
            "type_tag": self.type_tag,
        }


__all__ = ["SDKConfig"]
