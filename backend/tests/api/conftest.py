"""Fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from themegallery.api.deps import get_submission_pipeline
from themegallery.main import app
from themegallery.submissions.pipeline import ThemeSubmissionPipeline


@pytest.fixture
def pipeline(git_recorder, github_client_factory, workspace_root) -> ThemeSubmissionPipeline:
    """Pipeline running against recorded git calls and a mocked GitHub API."""
    return ThemeSubmissionPipeline(
        token="test-token",
        github_client=github_client_factory(),
        repository_factory=git_recorder,
        workspace_root=str(workspace_root),
    )


@pytest.fixture
def client(pipeline):
    """Test client whose submissions go through the fake pipeline."""
    app.dependency_overrides[get_submission_pipeline] = lambda: pipeline
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
