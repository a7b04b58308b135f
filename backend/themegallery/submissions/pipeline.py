"""Theme submission pipeline.

Turns a validated submission into a pull request against the website repository:
clone, branch, write the theme data file, commit, push, open the pull request.
The temporary clone is always removed, whichever step fails.
"""

import asyncio
import shutil
import tempfile
import time
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar

import aiofiles

from themegallery.core.config import settings
from themegallery.core.exceptions import MissingCredentialsError
from themegallery.core.logging import ContextualLogger, logger
from themegallery.platform.git import GitRepository
from themegallery.platform.github import GitHubClient
from themegallery.schemas import PullRequest, SubmissionIdentifiers, ThemeSubmission
from themegallery.submissions.naming import derive_identifiers
from themegallery.submissions.pull_request import (
    build_pull_request_body,
    build_pull_request_title,
)
from themegallery.submissions.records import build_local_theme_record, render_theme_record

T = TypeVar("T")

RepositoryFactory = Callable[[Path], GitRepository]


class ThemeSubmissionPipeline:
    """Runs the submission steps strictly in order; one instance may serve concurrent runs.

    Collaborators are injectable so the steps can run against fakes; by default
    they come from settings.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        github_client: Optional[GitHubClient] = None,
        repository_factory: RepositoryFactory = GitRepository,
        workspace_root: Optional[str] = None,
    ):
        """Initialize the pipeline.

        Args:
            token: GitHub token; defaults to settings.GITHUB_TOKEN.
            github_client: Client used to open the pull request.
            repository_factory: Builds the working copy wrapper for a directory.
            workspace_root: Parent of the temporary clone; defaults to the system temp dir.
        """
        self.token = token if token is not None else settings.GITHUB_TOKEN
        self.github_client = github_client
        self.repository_factory = repository_factory
        self.workspace_root = workspace_root or settings.WORKSPACE_ROOT

    async def _step(self, log: ContextualLogger, name: str, action: Awaitable[T]) -> T:
        """Await one step, logging its name and duration."""
        log.info(f"🔄 {name}")
        start_time = time.time()
        try:
            result = await action
        except Exception as e:
            duration = time.time() - start_time
            log.error(f"❌ {name} failed after {duration:.2f}s: {e}")
            raise
        duration = time.time() - start_time
        log.info(f"✅ {name} completed in {duration:.2f}s")
        return result

    async def _prepare_workspace(
        self, log: ContextualLogger, identifiers: SubmissionIdentifiers
    ) -> Path:
        if self.workspace_root:
            Path(self.workspace_root).mkdir(parents=True, exist_ok=True)
        workspace = tempfile.mkdtemp(
            prefix=f"{settings.THEME_REPO_NAME}-{identifiers.timestamp}-",
            dir=self.workspace_root,
        )
        # Git steps run from different directories, so the workspace must be absolute
        workspace = Path(workspace).resolve()
        log.info(f"Workspace: {workspace}")
        return workspace

    async def _write_record(self, submission: ThemeSubmission, theme_file: Path) -> None:
        theme_file.parent.mkdir(parents=True, exist_ok=True)
        record = build_local_theme_record(submission)
        async with aiofiles.open(theme_file, "w", encoding="utf-8") as f:
            await f.write(render_theme_record(record))

    async def _open_pull_request(
        self, submission: ThemeSubmission, identifiers: SubmissionIdentifiers
    ) -> PullRequest:
        client = self.github_client or GitHubClient(token=self.token)
        return await client.create_pull_request(
            owner=settings.THEME_REPO_OWNER,
            repo=settings.THEME_REPO_NAME,
            title=build_pull_request_title(submission),
            body=build_pull_request_body(submission),
            head=identifiers.branch_name,
            base=settings.THEME_REPO_BASE_BRANCH,
        )

    async def _cleanup(self, log: ContextualLogger, workspace: Path) -> None:
        log.info(f"🧹 Removing workspace {workspace}")
        await asyncio.to_thread(shutil.rmtree, workspace, ignore_errors=True)

    async def run(
        self,
        submission: ThemeSubmission,
        identifiers: Optional[SubmissionIdentifiers] = None,
    ) -> PullRequest:
        """Submit a theme as a pull request.

        Args:
            submission: The validated submission.
            identifiers: Branch and file names; derived with the current time when omitted.

        Returns:
            The opened pull request.

        Raises:
            MissingCredentialsError: If no GitHub token is configured.
            GitCommandError: If a git step fails.
            httpx.HTTPStatusError: If GitHub rejects the pull request.
        """
        if not self.token:
            raise MissingCredentialsError()

        identifiers = identifiers or derive_identifiers(submission)
        log = logger.with_context(component="theme_submission", branch=identifiers.branch_name)
        log.info(f"Theme data: {submission.model_dump(by_alias=True)}")
        log.info(f"Branch name: {identifiers.branch_name}")
        log.info(f"Theme file name: {identifiers.file_name}")

        workspace: Optional[Path] = None
        try:
            workspace = await self._step(
                log, "prepare_workspace", self._prepare_workspace(log, identifiers)
            )
            repository = self.repository_factory(workspace)
            theme_file = workspace / settings.THEME_DATA_DIR / identifiers.file_name

            await self._step(
                log,
                f"git.clone {settings.THEME_REPO_URL}",
                repository.clone(settings.THEME_REPO_URL, depth=1, single_branch=True),
            )
            await self._step(
                log,
                f"git.branch {identifiers.branch_name}",
                repository.branch(identifiers.branch_name),
            )
            await self._step(
                log,
                f"git.checkout {identifiers.branch_name}",
                repository.checkout(identifiers.branch_name),
            )
            await self._step(log, f"write {theme_file}", self._write_record(submission, theme_file))
            await self._step(log, f"git.add {theme_file}", repository.add(theme_file))
            await self._step(
                log,
                "git.commit",
                repository.commit(
                    message=f"Add theme {submission.theme_name}",
                    author_name=settings.BOT_NAME,
                    author_email=settings.BOT_EMAIL,
                ),
            )
            await self._step(
                log,
                "git.push",
                repository.push(
                    remote="origin",
                    ref=identifiers.branch_name,
                    username=settings.BOT_NAME,
                    password=self.token,
                ),
            )
            pull_request = await self._step(
                log, "create PR", self._open_pull_request(submission, identifiers)
            )
            log.info("done!")
            return pull_request
        finally:
            if workspace is not None:
                await self._cleanup(log, workspace)
