"""GitHub REST API client for opening theme submission pull requests."""

from typing import Any, Dict, Optional

import httpx

from themegallery.core.config import settings
from themegallery.core.logging import logger
from themegallery.schemas import PullRequest


class GitHubClient:
    """Minimal GitHub REST client authenticated with a personal access token.

    Errors are not retried: a failed call raises ``httpx.HTTPStatusError`` (or a
    transport error) to the caller.
    """

    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            token: GitHub token with permission to open pull requests.
            base_url: API root; defaults to the configured GITHUB_API_URL.
            timeout: Per-request timeout in seconds.
            transport: Optional transport, e.g. ``httpx.MockTransport`` in tests.
        """
        self.token = token
        self.base_url = (base_url or settings.GITHUB_API_URL).rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"token {self.token}",
            "Accept": "application/vnd.github.v3+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    async def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        ) as client:
            response = await client.post(path, headers=self._headers(), json=payload)
            response.raise_for_status()
            return response.json()

    async def create_pull_request(
        self,
        owner: str,
        repo: str,
        title: str,
        body: str,
        head: str,
        base: str,
    ) -> PullRequest:
        """Open a pull request from `head` into `base`.

        Args:
            owner: Repository owner.
            repo: Repository name.
            title: Pull request title.
            body: Markdown body.
            head: Branch holding the changes.
            base: Branch to merge into.

        Returns:
            The created pull request.
        """
        data = await self._post(
            f"/repos/{owner}/{repo}/pulls",
            {"title": title, "body": body, "head": head, "base": base},
        )
        pull_request = PullRequest(
            number=data["number"],
            url=data["html_url"],
            title=data.get("title", title),
            head=data.get("head", {}).get("ref", head),
            base=data.get("base", {}).get("ref", base),
        )
        logger.info(f"Opened pull request #{pull_request.number}: {pull_request.url}")
        return pull_request
