"""
Commands — One module per `n8n-cli` command group.
"""

from n8n_cli.commands.workflows import (
    EMPTY_MESSAGE,
    list_workflows,
    normalize_page_limit,
)

__all__ = [
    "EMPTY_MESSAGE",
    "list_workflows",
    "normalize_page_limit",
]
