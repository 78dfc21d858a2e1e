"""
Workflow commands — `n8n-cli workflows ...`.

The listing asks the provider for a single page and prints one line per
workflow, in the order the provider returned them.
"""

from __future__ import annotations

from typing import TextIO

import structlog

from n8n_cli.client import WorkflowProvider
from n8n_cli.models import Workflow

logger = structlog.get_logger(__name__)

EMPTY_MESSAGE = "No workflows found"


def normalize_page_limit(requested: int | None) -> int | None:
    """Map the `--limit` flag to an API page size; unset, zero or negative become None."""
    if requested is None or requested <= 0:
        return None
    return requested


def format_workflow_line(workflow: Workflow) -> str:
    """Render one workflow as `ID: <id>, Name: <name>`."""
    return f"ID: {workflow.id}, Name: {workflow.name}"


async def list_workflows(
    provider: WorkflowProvider,
    page_limit: int | None,
    out: TextIO,
) -> None:
    """
    List workflows from the provider onto `out`.

    Provider errors propagate unchanged. Nothing is written before the
    provider call returns.
    """
    effective_limit = normalize_page_limit(page_limit)
    logger.debug("listing_workflows", page_limit=effective_limit)

    workflow_list = await provider.get_workflows(effective_limit)

    if workflow_list is None or workflow_list.is_empty:
        out.write(EMPTY_MESSAGE + "\n")
        return

    for workflow in workflow_list.data:
        out.write(format_workflow_line(workflow) + "\n")
