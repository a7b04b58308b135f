"""Common test fixtures."""

import json
from pathlib import Path
from typing import Callable, Dict, List, Optional

import httpx
import pytest

from themegallery.core.exceptions import GitCommandError
from themegallery.platform.github import GitHubClient
from themegallery.schemas import ThemeSubmission


def make_image(name: str) -> dict:
    """Form image payload for an uploaded file called `name`."""
    return {
        "filename": name,
        "type": "image/png",
        "size": 1024,
        "url": f"https://uploads.example.com/{name}",
    }


@pytest.fixture
def submission_data() -> dict:
    """Minimal valid submission payload, as posted by the form."""
    return {
        "mainPreviewImage": make_image("main.png"),
        "authorName": "Jo",
        "authorEmail": "jo@example.com",
        "themeName": "My Cool Theme",
        "paidStatus": "free",
        "shortDescription": "desc",
    }


@pytest.fixture
def submission(submission_data) -> ThemeSubmission:
    """Validated minimal submission."""
    return ThemeSubmission.model_validate(submission_data)


class FakeGitRepository:
    """In-memory stand-in for GitRepository that records every call.

    Files passed to ``add`` are read immediately so tests can inspect what would
    have been committed after the workspace is gone.
    """

    def __init__(self, directory: Path, calls: List[tuple], fail_on: Optional[str] = None):
        self.directory = Path(directory)
        self.calls = calls
        self.fail_on = fail_on
        self.staged: Dict[str, str] = {}

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if name == self.fail_on:
            raise GitCommandError([name], 128, f"fatal: {name} failed")

    async def clone(self, url: str, depth: Optional[int] = 1, single_branch: bool = True):
        self._record("clone", url, depth, single_branch)
        (self.directory / "README.md").write_text("# astro.build\n")

    async def branch(self, name: str):
        self._record("branch", name)

    async def checkout(self, ref: str):
        self._record("checkout", ref)

    async def add(self, path):
        path = Path(path)
        self.staged[str(path.relative_to(self.directory))] = path.read_text(encoding="utf-8")
        self._record("add", str(path.relative_to(self.directory)))

    async def commit(self, message: str, author_name: str, author_email: str):
        self._record("commit", message, author_name, author_email)

    async def push(self, remote: str, ref: str, username: str, password: str):
        self._record("push", remote, ref, username, password)


class GitRecorder:
    """Factory handing out FakeGitRepository instances that share one call log."""

    def __init__(self, fail_on: Optional[str] = None):
        self.calls: List[tuple] = []
        self.fail_on = fail_on
        self.repositories: List[FakeGitRepository] = []

    def __call__(self, directory: Path) -> FakeGitRepository:
        repository = FakeGitRepository(directory, self.calls, self.fail_on)
        self.repositories.append(repository)
        return repository

    @property
    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def git_recorder() -> GitRecorder:
    """Records git calls made by the pipeline."""
    return GitRecorder()


def pull_request_response(request: httpx.Request) -> httpx.Response:
    """Build the GitHub response for a pull request creation request."""
    payload = json.loads(request.content)
    return httpx.Response(
        201,
        json={
            "number": 42,
            "html_url": "https://github.com/withastro/astro.build/pull/42",
            "title": payload["title"],
            "head": {"ref": payload["head"]},
            "base": {"ref": payload["base"]},
        },
    )


@pytest.fixture
def github_requests() -> List[httpx.Request]:
    """Requests received by the mocked GitHub API."""
    return []


@pytest.fixture
def github_client_factory(github_requests) -> Callable[..., GitHubClient]:
    """Build a GitHubClient whose requests are answered by `responder`."""

    def factory(responder: Callable[[httpx.Request], httpx.Response] = pull_request_response):
        def handler(request: httpx.Request) -> httpx.Response:
            github_requests.append(request)
            return responder(request)

        return GitHubClient(
            token="test-token",
            base_url="https://api.github.test",
            transport=httpx.MockTransport(handler),
        )

    return factory
