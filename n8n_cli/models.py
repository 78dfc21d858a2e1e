"""
API Models — Pydantic models for the n8n public API payloads.

Defines the data returned by the workflow listing endpoint:
  - Workflow: A single workflow summary
  - WorkflowList: One page of workflows as returned by the API
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Page size applied by the n8n API when no limit is sent.
DEFAULT_PAGE_LIMIT = 100

# Largest page size the n8n API accepts. Not enforced client-side.
MAX_PAGE_LIMIT = 250


class Workflow(BaseModel):
    """Summary of a workflow on the n8n instance."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    name: str = ""
    active: bool = False


class WorkflowList(BaseModel):
    """One page of workflows from `GET /workflows`."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    data: list[Workflow] | None = None
    next_cursor: str | None = Field(default=None, alias="nextCursor")

    @property
    def is_empty(self) -> bool:
        """True when `data` is absent or has no workflows; both mean nothing to list."""
        return not self.data
