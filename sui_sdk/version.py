"""
Version helpers for the Sui Python SDK.

The static ``__version__`` (PEP 440) is the source of truth; the installed
distribution metadata is consulted only to report what is actually on the
import path, which differs from the source tree in editable/dev installs.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import metadata
from typing import Optional

# Bump this when publishing
__version__ = "0.1.0"

DIST_NAME = "sui-sdk"


@dataclass(frozen=True)
class VersionInfo:
    base: str
    installed: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        if not self.installed or self.installed == self.base:
            return self.base
        return f"{self.base} (installed {self.installed})"


def _installed_version() -> Optional[str]:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return None


def version_info() -> VersionInfo:
    """Structured version info (source version plus installed dist version)."""
    return VersionInfo(base=__version__, installed=_installed_version())


def version() -> str:
    """Human-friendly string, e.g. '0.1.0' or '0.1.0 (installed 0.0.9)'."""
    return str(version_info())


__all__ = ["__version__", "VersionInfo", "version_info", "version"]
