"""Async wrapper around the git command line client."""

import asyncio
import base64
import os
from pathlib import Path
from typing import Optional, Sequence, Union

from themegallery.core.exceptions import GitCommandError
from themegallery.core.logging import logger

REDACTED = "***"


def basic_auth_header(username: str, password: str) -> str:
    """HTTP Basic authorization header value for a git remote."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Authorization: Basic {token}"


class GitRepository:
    """A working copy driven through ``git`` subprocesses.

    Every command runs to completion before the call returns. A non-zero exit
    status raises :class:`GitCommandError` with the command line redacted of any
    credentials.
    """

    def __init__(self, directory: Union[str, Path], git_binary: str = "git"):
        """Bind the wrapper to a working copy directory.

        Args:
            directory: Directory of the working copy (the clone target for `clone`).
            git_binary: Name or path of the git executable.
        """
        # Resolved once: clone runs from the parent directory, every other command from here
        self.directory = Path(directory).resolve()
        self.git_binary = git_binary
        self.logger = logger.with_context(repository=str(self.directory))

    async def _run(
        self,
        args: Sequence[str],
        cwd: Optional[Path] = None,
        secrets: Sequence[str] = (),
    ) -> str:
        """Run a git command and return its stdout.

        Args:
            args: Arguments following the git executable.
            cwd: Working directory; the working copy when omitted.
            secrets: Argument values to mask in logs and errors.
        """
        redacted = [REDACTED if arg in secrets else arg for arg in args]
        self.logger.debug(f"git {' '.join(redacted)}")

        env = {**os.environ, "GIT_TERMINAL_PROMPT": "0"}
        process = await asyncio.create_subprocess_exec(
            self.git_binary,
            *args,
            cwd=str(cwd or self.directory),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            env=env,
        )
        stdout, stderr = await process.communicate()

        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace")
            for secret in secrets:
                message = message.replace(secret, REDACTED)
            raise GitCommandError(redacted, process.returncode, message)

        return stdout.decode("utf-8", errors="replace")

    async def clone(self, url: str, depth: Optional[int] = 1, single_branch: bool = True) -> None:
        """Clone `url` into the working copy directory (which must be empty or absent)."""
        args = ["clone"]
        if depth is not None:
            args += ["--depth", str(depth)]
        if single_branch:
            args.append("--single-branch")
        args += [url, str(self.directory)]

        self.directory.parent.mkdir(parents=True, exist_ok=True)
        await self._run(args, cwd=self.directory.parent)

    async def branch(self, name: str) -> None:
        """Create a branch at HEAD without switching to it."""
        await self._run(["branch", name])

    async def checkout(self, ref: str) -> None:
        """Switch the working copy to `ref`."""
        await self._run(["checkout", ref])

    async def add(self, path: Union[str, Path]) -> None:
        """Stage a single path, given absolute or relative to the working copy."""
        path = Path(path)
        if path.is_absolute():
            path = path.resolve().relative_to(self.directory)
        await self._run(["add", "--", path.as_posix()])

    async def commit(self, message: str, author_name: str, author_email: str) -> None:
        """Commit the staged changes as the given author (also used as committer)."""
        await self._run(
            [
                "-c",
                f"user.name={author_name}",
                "-c",
                f"user.email={author_email}",
                "commit",
                "--no-verify",
                "-m",
                message,
            ]
        )

    async def push(self, remote: str, ref: str, username: str, password: str) -> None:
        """Push `ref` to `remote`, authenticating with HTTP Basic credentials."""
        header = f"http.extraHeader={basic_auth_header(username, password)}"
        await self._run(["-c", header, "push", remote, ref], secrets=(header,))
