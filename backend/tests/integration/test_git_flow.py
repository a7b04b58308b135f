"""Integration tests running the real git binary against a local bare origin."""

import json
import os
import shutil
import subprocess
from pathlib import Path

import pytest

from themegallery.core.config import settings
from themegallery.platform.git import GitRepository
from themegallery.submissions.naming import derive_identifiers
from themegallery.submissions.pipeline import ThemeSubmissionPipeline

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")

IDENTITY = ["-c", "user.name=seed", "-c", "user.email=seed@example.com"]


def _git(*args: str, cwd: Path) -> str:
    result = subprocess.run(
        ["git", *args], cwd=cwd, check=True, capture_output=True, text=True
    )
    return result.stdout.strip()


def _init_with_commit(directory: Path) -> None:
    _git("init", str(directory), cwd=directory.parent)
    _git("symbolic-ref", "HEAD", "refs/heads/main", cwd=directory)
    (directory / "README.md").write_text("# astro.build\n")
    _git("add", "README.md", cwd=directory)
    _git(*IDENTITY, "commit", "-m", "Initial commit", cwd=directory)


@pytest.fixture
def origin(tmp_path, monkeypatch) -> Path:
    """Bare repository with a single commit on main, isolated from user git config."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")

    bare = tmp_path / "origin.git"
    _git("init", "--bare", str(bare), cwd=tmp_path)
    _git("symbolic-ref", "HEAD", "refs/heads/main", cwd=bare)

    seed = tmp_path / "seed"
    seed.mkdir()
    _init_with_commit(seed)
    _git("push", str(bare), "main", cwd=seed)
    return bare


@pytest.mark.asyncio
async def test_clone_branch_commit_and_push(tmp_path, origin):
    """The full git sequence lands the file on a new branch of the origin."""
    branch = "theme-submissions/x-1"
    repository = GitRepository(tmp_path / "work" / "clone")

    await repository.clone(origin.as_uri())
    await repository.branch(branch)
    await repository.checkout(branch)
    theme_file = repository.directory / "src" / "data" / "themes" / "x-1.json"
    theme_file.parent.mkdir(parents=True)
    theme_file.write_text('{"title": "X"}')
    await repository.add(theme_file)
    await repository.commit("Add theme X", "astrobot", "astrobot@astro.build")
    await repository.push("origin", branch, "astrobot", "secret")

    assert _git("show", f"{branch}:src/data/themes/x-1.json", cwd=origin) == '{"title": "X"}'
    assert _git("log", "-1", "--format=%an <%ae> %s", branch, cwd=origin) == (
        "astrobot <astrobot@astro.build> Add theme X"
    )
    assert _git("rev-parse", "main", cwd=origin) == _git("rev-parse", f"{branch}~1", cwd=origin)


@pytest.mark.asyncio
async def test_pipeline_with_relative_workspace_inside_another_repository(
    tmp_path, origin, submission, github_client_factory, monkeypatch
):
    """Running from inside a checkout with a relative workspace leaves that checkout alone."""
    host = tmp_path / "host"
    host.mkdir()
    _init_with_commit(host)
    monkeypatch.chdir(host)
    monkeypatch.setattr(settings, "THEME_REPO_URL", origin.as_uri())
    identifiers = derive_identifiers(submission, timestamp=1700000000000)
    pipeline = ThemeSubmissionPipeline(
        token="test-token", github_client=github_client_factory(), workspace_root="ws"
    )

    pull_request = await pipeline.run(submission, identifiers)

    assert pull_request.head == identifiers.branch_name
    pushed = _git(
        "show",
        f"{identifiers.branch_name}:src/data/themes/{identifiers.file_name}",
        cwd=origin,
    )
    assert json.loads(pushed)["title"] == "My Cool Theme"

    assert _git("rev-parse", "--abbrev-ref", "HEAD", cwd=host) == "main"
    assert "theme-submissions" not in _git("branch", "--list", cwd=host)
    assert list((host / "ws").iterdir()) == []
