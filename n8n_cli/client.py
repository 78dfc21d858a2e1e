"""
N8NClient — Async client for the n8n public REST API.

Wraps `GET /api/v1/workflows` behind the WorkflowProvider protocol so the
CLI commands can be driven by any object with the same shape (tests use a
recording fake).

Usage:
    async with N8NClient("http://localhost:5678", api_key="...") as client:
        workflows = await client.get_workflows(page_limit=10)
"""

from __future__ import annotations

import time
from typing import Protocol

import httpx
import structlog
from pydantic import ValidationError

from n8n_cli.errors import N8NAPIError, N8NAuthError, N8NConnectionError
from n8n_cli.models import WorkflowList

logger = structlog.get_logger(__name__)

API_PREFIX = "/api/v1"
API_KEY_HEADER = "X-N8N-API-KEY"


class WorkflowProvider(Protocol):
    """Anything that can fetch one page of workflows."""

    async def get_workflows(self, page_limit: int | None = None) -> WorkflowList | None:
        """Return one page of workflows; `None` lets the server pick the page size."""
        ...


# ── Async n8n Client ─────────────────────────────────────────────────


class N8NClient:
    """
    Async n8n API client.

    Features:
    - httpx.AsyncClient with HTTP/2 and connection pooling
    - Typed errors for connection, auth and API failures
    - Structured logging for every API call
    """

    def __init__(self, instance_url: str, api_key: str, timeout: float = 30.0):
        self._token = api_key
        self.base_url = instance_url.rstrip("/") + API_PREFIX
        try:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                http2=True,
                headers={
                    API_KEY_HEADER: self._token,
                    "Accept": "application/json",
                },
                timeout=httpx.Timeout(timeout, connect=10.0),
            )
        except httpx.InvalidURL as e:
            raise N8NConnectionError(f"Invalid instance URL {instance_url!r}: {e}") from e

    async def __aenter__(self) -> N8NClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        """Execute an async API request with error handling."""
        start = time.monotonic()
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.ConnectError as e:
            raise N8NConnectionError(f"Connection failed: {e}") from e
        except httpx.TimeoutException as e:
            raise N8NConnectionError(f"Request timed out: {e}") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise N8NConnectionError(f"Request failed: {e}") from e

        latency_ms = (time.monotonic() - start) * 1000

        if resp.status_code in (401, 403):
            raise N8NAuthError(
                "Authentication failed: check your n8n API key",
                detail=str(resp.status_code),
            )
        if resp.status_code >= 400:
            raise N8NAPIError(
                f"API error: {resp.status_code} {resp.text}".rstrip(),
                status_code=resp.status_code,
                detail=str(resp.status_code),
            )

        logger.debug(
            "n8n_request",
            method=method,
            path=path,
            status=resp.status_code,
            latency_ms=round(latency_ms),
            http_version=resp.http_version,
        )

        try:
            return resp.json()
        except ValueError as e:
            raise N8NAPIError(
                f"API error: response is not valid JSON ({e})",
                status_code=resp.status_code,
            ) from e

    async def get_workflows(self, page_limit: int | None = None) -> WorkflowList | None:
        """
        Fetch one page of workflows.

        Args:
            page_limit: Page size to request. `None` omits the `limit`
                parameter so the server applies its default.

        Returns:
            The parsed page, or None when the server returned an empty body.
        """
        params = {}
        if page_limit is not None:
            params["limit"] = page_limit

        data = await self._request("GET", "/workflows", params=params)
        if data is None:
            return None

        try:
            workflows = WorkflowList.model_validate(data)
        except ValidationError as e:
            raise N8NAPIError(f"API error: unexpected workflow payload ({e.error_count()} errors)") from e

        logger.debug(
            "n8n_workflows_fetched",
            count=len(workflows.data or []),
            page_limit=page_limit,
            has_more=workflows.next_cursor is not None,
        )
        return workflows

    async def close(self):
        """Close the underlying HTTP/2 connection pool."""
        await self._client.aclose()
