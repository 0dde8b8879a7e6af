import os

import pytest

# Set test environment variables before importing any application code
os.environ.update({
    "ENVIRONMENT": "test",
    "DEBUG": "true",
    "CORS_ORIGINS": "http://localhost:3000,http://localhost:3001",
    "SOLVE_TIMEOUT_SECONDS": "30",
})

from fastapi.testclient import TestClient  # noqa: E402

from taskpicker_api.config import settings  # noqa: E402
from taskpicker_api.main import app  # noqa: E402


@pytest.fixture(scope="function")
def workspace_file(tmp_path, monkeypatch):
    """Point the workspace store at a fresh file for each test"""
    path = tmp_path / "workspace.json"
    monkeypatch.setattr(settings, "workspace_file", str(path))
    return path


@pytest.fixture(scope="function")
def client(workspace_file):
    """Create a test client backed by an isolated workspace file"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_payload():
    from task_selector.samples import sample_constraints, sample_tasks

    return {
        "tasks": [task.model_dump() for task in sample_tasks()],
        "constraints": sample_constraints().model_dump(),
    }
