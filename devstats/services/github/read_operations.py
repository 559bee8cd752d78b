"""
GitHub API read operations.

Lists the commits and pull requests of a repository for a report window.
Only the first page (100 items) is requested; callers treat a full page as
a possible undercount.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, TypeVar

import httpx

from devstats.services.github.exceptions import GitHubAPIError
from devstats.services.github.helpers import handle_error_response
from devstats.services.github.http_client import get_github_client
from devstats.services.github.types import CommitRecord, PullRequestRecord

logger = logging.getLogger(__name__)

PAGE_SIZE = 100

T = TypeVar("T")


def to_github_timestamp(moment: datetime) -> str:
    """Render a datetime as the ISO-8601 UTC string GitHub expects."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    utc = moment.astimezone(UTC)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class GitHubReadOperations:
    """
    Read-only operations for GitHub API.

    Uses the shared HTTP client singleton for connection pooling.
    """

    BASE_URL = "https://api.github.com"
    API_VERSION = "2022-11-28"

    def __init__(self, token: str, base_url: str | None = None):
        self.token = token
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.API_VERSION,
        }

    async def _get_list(
        self,
        repo: str,
        path: str,
        params: dict[str, str | int],
    ) -> httpx.Response:
        client = get_github_client()
        try:
            return await client.get(
                f"{self.base_url}/repos/{repo}/{path}",
                headers=self._headers,
                params=params,
            )
        except httpx.RequestError as e:
            raise GitHubAPIError(f"Request to GitHub failed for {repo}/{path}: {e}") from e

    @staticmethod
    def _parse_items(
        response: httpx.Response,
        repo: str,
        build: Callable[[dict[str, Any]], T],
    ) -> list[T]:
        try:
            data = response.json()
        except ValueError as e:
            raise GitHubAPIError(f"GitHub returned invalid JSON for {repo}") from e

        if not isinstance(data, list):
            raise GitHubAPIError(
                f"Unexpected GitHub response for {repo}: expected a list",
                response.status_code,
            )

        try:
            return [build(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise GitHubAPIError(f"Malformed item in GitHub response for {repo}: {e}") from e

    async def fetch_commits(
        self,
        repo: str,
        since: datetime,
        until: datetime,
    ) -> list[CommitRecord]:
        """
        Fetch commits authored in [since, until].

        Args:
            repo: Repository in "owner/name" form
            since: Lower bound forwarded to the API
            until: Upper bound forwarded to the API

        Returns:
            CommitRecords in API order (newest first), at most PAGE_SIZE
        """
        response = await self._get_list(
            repo,
            "commits",
            {
                "per_page": PAGE_SIZE,
                "since": to_github_timestamp(since),
                "until": to_github_timestamp(until),
            },
        )

        # GitHub answers 409 "Git Repository is empty" for repos with no commits
        if response.status_code == 409:
            logger.info(f"Repository {repo} is empty, no commits to report")
            return []

        handle_error_response(response, repo)
        commits = self._parse_items(response, repo, CommitRecord.from_api)
        logger.debug(f"Fetched {len(commits)} commits for {repo}")
        return commits

    async def fetch_pull_requests(
        self,
        repo: str,
        since: datetime,
        until: datetime,
    ) -> list[PullRequestRecord]:
        """
        Fetch pull requests in any state.

        The pulls endpoint ignores since/until; they are sent anyway and the
        aggregator does the date filtering.
        """
        response = await self._get_list(
            repo,
            "pulls",
            {
                "per_page": PAGE_SIZE,
                "state": "all",
                "since": to_github_timestamp(since),
                "until": to_github_timestamp(until),
            },
        )

        handle_error_response(response, repo)
        pulls = self._parse_items(response, repo, PullRequestRecord.from_api)
        logger.debug(f"Fetched {len(pulls)} pull requests for {repo}")
        return pulls


async def fetch_commits(
    token: str, repo: str, since: datetime, until: datetime
) -> list[CommitRecord]:
    """Shorthand for GitHubReadOperations(token).fetch_commits(...)."""
    return await GitHubReadOperations(token).fetch_commits(repo, since, until)


async def fetch_pull_requests(
    token: str, repo: str, since: datetime, until: datetime
) -> list[PullRequestRecord]:
    """Shorthand for GitHubReadOperations(token).fetch_pull_requests(...)."""
    return await GitHubReadOperations(token).fetch_pull_requests(repo, since, until)
