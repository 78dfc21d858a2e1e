"""
Structured Error Taxonomy — Typed exceptions for the n8n CLI.

  - Every error carries `error_code` + `exit_code` for the CLI entry point
  - Hierarchy mirrors the layers: Configuration → Client (HTTP provider)
  - Structured logging friendly: all errors serialize cleanly to a dict
"""

from __future__ import annotations

__all__ = [
    # Base
    "N8NCliError",
    # Configuration layer
    "ConfigurationError",
    # Client layer
    "ClientError",
    "N8NConnectionError",
    "N8NAuthError",
    "N8NAPIError",
]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Base
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class N8NCliError(Exception):
    """Root exception for the n8n CLI.

    Attributes:
        error_code: Machine-readable code for logs.
        exit_code: Process exit status used by the CLI entry point.
    """

    error_code: str = "N8N_CLI_ERROR"
    exit_code: int = 1

    def __init__(self, message: str, *, detail: str | None = None):
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict:
        """Serialize for structured logging."""
        return {
            "error_code": self.error_code,
            "message": str(self),
            "detail": self.detail,
            "exit_code": self.exit_code,
        }


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Configuration Layer — Missing or invalid local settings
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class ConfigurationError(N8NCliError):
    """A required setting (API key, instance URL) is missing or invalid."""

    error_code = "CONFIGURATION_ERROR"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Client Layer — Errors from the n8n public API
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class ClientError(N8NCliError):
    """Base for all errors raised by the n8n API client."""

    error_code = "CLIENT_ERROR"


class N8NConnectionError(ClientError):
    """The n8n instance is unreachable or the request timed out."""

    error_code = "CONNECTION_ERROR"


class N8NAuthError(ClientError):
    """The n8n instance rejected the API key."""

    error_code = "AUTH_ERROR"


class N8NAPIError(ClientError):
    """The n8n API answered with an error status or an unreadable body."""

    error_code = "API_ERROR"

    def __init__(self, message: str, *, status_code: int | None = None, **kwargs):
        self.status_code = status_code
        super().__init__(message, **kwargs)

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["status_code"] = self.status_code
        return d
