import pytest

from n8n_cli.config import get_settings
from n8n_cli.logging import setup_logging
from n8n_cli.models import Workflow, WorkflowList


class FakeWorkflowProvider:
    """Records every get_workflows() call and replays a scripted result."""

    def __init__(self, result=None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[int | None] = []

    async def get_workflows(self, page_limit=None):
        self.calls.append(page_limit)
        if self.error is not None:
            raise self.error
        return self.result

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None


def make_workflow_list(count: int) -> WorkflowList:
    """Workflows with ids "1".."count" and names "Workflow 1".."Workflow count"."""
    return WorkflowList(
        data=[
            Workflow(id=str(i), name=f"Workflow {i}", active=True)
            for i in range(1, count + 1)
        ]
    )


@pytest.fixture
def fake_provider():
    return FakeWorkflowProvider(result=make_workflow_list(3))


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Keep N8N_* variables from the developer's shell out of the tests."""
    for var in ("N8N_API_KEY", "N8N_INSTANCE_URL", "N8N_LOG_LEVEL", "N8N_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def quiet_logging():
    """Start every test from the CLI's default WARNING-level logging."""
    setup_logging()
    yield
