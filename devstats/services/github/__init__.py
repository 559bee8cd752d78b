"""
GitHub service package.

Usage: `from devstats.services.github import GitHubReadOperations`

Module structure:
- read_operations.py: Commit and pull request listing
- helpers.py: Rate limit handling and error utilities
- http_client.py: Shared httpx client
- types.py: Records built from API responses
- exceptions.py: Custom exceptions
"""

from devstats.services.github.exceptions import GitHubAPIError
from devstats.services.github.helpers import RateLimitInfo, handle_error_response
from devstats.services.github.http_client import close_github_client, get_github_client
from devstats.services.github.read_operations import (
    PAGE_SIZE,
    GitHubReadOperations,
    fetch_commits,
    fetch_pull_requests,
)
from devstats.services.github.types import CommitRecord, PullRequestRecord

__all__ = [
    # Operations
    "GitHubReadOperations",
    "fetch_commits",
    "fetch_pull_requests",
    "PAGE_SIZE",
    # HTTP client lifecycle
    "close_github_client",
    "get_github_client",
    # Utilities
    "handle_error_response",
    "RateLimitInfo",
    # Exceptions
    "GitHubAPIError",
    # Types
    "CommitRecord",
    "PullRequestRecord",
]
