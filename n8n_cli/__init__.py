"""
n8n CLI — Command-line client for the n8n public API.

Provides the typed API client, the workflow commands, and the shared
configuration, logging and error infrastructure behind `n8n-cli`.
"""

from n8n_cli.client import N8NClient, WorkflowProvider
from n8n_cli.commands.workflows import list_workflows, normalize_page_limit
from n8n_cli.errors import (
    ClientError,
    ConfigurationError,
    N8NAPIError,
    N8NAuthError,
    N8NCliError,
    N8NConnectionError,
)
from n8n_cli.models import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT, Workflow, WorkflowList
from n8n_cli.version import VERSION

__version__ = VERSION

__all__ = [
    # Client
    "N8NClient",
    "WorkflowProvider",
    # Commands
    "list_workflows",
    "normalize_page_limit",
    # Models
    "Workflow",
    "WorkflowList",
    "DEFAULT_PAGE_LIMIT",
    "MAX_PAGE_LIMIT",
    # Errors
    "N8NCliError",
    "ConfigurationError",
    "ClientError",
    "N8NConnectionError",
    "N8NAuthError",
    "N8NAPIError",
]
