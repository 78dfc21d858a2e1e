"""
Tests for `workflows list` — page limit handling and rendering.

Uses a recording fake provider: no HTTP client is involved here.
"""

import io

import pytest

from conftest import FakeWorkflowProvider, make_workflow_list
from n8n_cli.commands.workflows import (
    EMPTY_MESSAGE,
    format_workflow_line,
    list_workflows,
    normalize_page_limit,
)
from n8n_cli.errors import N8NAPIError
from n8n_cli.models import MAX_PAGE_LIMIT, Workflow, WorkflowList


# ── normalize_page_limit ─────────────────────────────────────────────


@pytest.mark.parametrize("requested", [None, 0, -1, -250])
def test_unset_or_non_positive_limit_is_absent(requested):
    assert normalize_page_limit(requested) is None


@pytest.mark.parametrize("requested", [1, 5, 100, MAX_PAGE_LIMIT, MAX_PAGE_LIMIT + 1])
def test_positive_limit_is_passed_through(requested):
    # No client-side clamping: the API enforces its own ceiling.
    assert normalize_page_limit(requested) == requested


def test_format_workflow_line():
    wf = Workflow(id="abc123", name="Sync CRM", active=False)

    assert format_workflow_line(wf) == "ID: abc123, Name: Sync CRM"


# ── Provider call ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_no_limit_calls_provider_with_none(fake_provider):
    out = io.StringIO()

    await list_workflows(fake_provider, None, out)

    assert fake_provider.calls == [None]
    assert out.getvalue().splitlines() == [
        "ID: 1, Name: Workflow 1",
        "ID: 2, Name: Workflow 2",
        "ID: 3, Name: Workflow 3",
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("requested", [0, -3])
async def test_non_positive_limit_is_never_forwarded(requested, fake_provider):
    await list_workflows(fake_provider, requested, io.StringIO())

    assert fake_provider.calls == [None]


@pytest.mark.asyncio
async def test_limit_is_forwarded_verbatim():
    provider = FakeWorkflowProvider(result=make_workflow_list(5))

    await list_workflows(provider, 5, io.StringIO())

    assert provider.calls == [5]


@pytest.mark.asyncio
async def test_limit_is_forwarded_regardless_of_result_size():
    provider = FakeWorkflowProvider(result=make_workflow_list(2))

    await list_workflows(provider, 5, io.StringIO())

    assert provider.calls == [5]


# ── Rendering ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_empty_collection_prints_empty_message():
    provider = FakeWorkflowProvider(result=WorkflowList(data=[]))
    out = io.StringIO()

    await list_workflows(provider, None, out)

    assert out.getvalue() == EMPTY_MESSAGE + "\n"
    assert EMPTY_MESSAGE == "No workflows found"


@pytest.mark.asyncio
@pytest.mark.parametrize("result", [None, WorkflowList(), WorkflowList(data=None)])
async def test_absent_collection_prints_empty_message(result):
    provider = FakeWorkflowProvider(result=result)
    out = io.StringIO()

    await list_workflows(provider, None, out)

    assert out.getvalue() == "No workflows found\n"


@pytest.mark.asyncio
async def test_rendering_keeps_provider_order():
    workflows = WorkflowList(
        data=[
            Workflow(id="zz", name="Last alphabetically", active=False),
            Workflow(id="aa", name="First alphabetically", active=True),
            Workflow(id="mm", name="Middle", active=True),
        ]
    )
    provider = FakeWorkflowProvider(result=workflows)
    out = io.StringIO()

    await list_workflows(provider, None, out)

    assert out.getvalue().splitlines() == [
        "ID: zz, Name: Last alphabetically",
        "ID: aa, Name: First alphabetically",
        "ID: mm, Name: Middle",
    ]


@pytest.mark.asyncio
async def test_one_line_per_workflow():
    provider = FakeWorkflowProvider(result=make_workflow_list(7))
    out = io.StringIO()

    await list_workflows(provider, 7, out)

    lines = out.getvalue().splitlines()
    assert len(lines) == 7
    assert all(line.startswith("ID: ") for line in lines)


# ── Errors ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_provider_error_propagates_unchanged():
    error = N8NAPIError("API error", status_code=500)
    provider = FakeWorkflowProvider(error=error)
    out = io.StringIO()

    with pytest.raises(N8NAPIError) as exc_info:
        await list_workflows(provider, None, out)

    assert exc_info.value is error
    assert "API error" in str(exc_info.value)
    assert out.getvalue() == ""


@pytest.mark.asyncio
async def test_unexpected_provider_exception_is_not_wrapped():
    provider = FakeWorkflowProvider(error=RuntimeError("API error"))

    with pytest.raises(RuntimeError, match="API error"):
        await list_workflows(provider, 10, io.StringIO())

    assert provider.calls == [10]


def test_max_page_limit_matches_api_ceiling():
    assert MAX_PAGE_LIMIT == 250
