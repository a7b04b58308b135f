"""Common test fixtures and configuration for pytest."""

import pytest

# Import all fixtures so they are automatically available for all tests
from tests.fixtures.common import (  # noqa
    git_recorder,
    github_client_factory,
    github_requests,
    submission,
    submission_data,
)


@pytest.fixture
def workspace_root(tmp_path):
    """Parent directory for pipeline workspaces, empty at test start."""
    root = tmp_path / "workspaces"
    root.mkdir()
    return root
