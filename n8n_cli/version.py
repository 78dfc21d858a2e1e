"""
Single source of truth for the CLI version.

Reads the installed distribution metadata at import time.
All other files import VERSION from here instead of hardcoding.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

__all__ = ["VERSION", "APP_NAME", "DIST_NAME"]

APP_NAME = "n8n-cli"
DIST_NAME = "n8n-cli"


def _read_version() -> str:
    """Read the version of the installed `n8n-cli` distribution."""
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.1.0"  # Running from a source checkout


VERSION = _read_version()
