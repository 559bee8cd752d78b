"""Unit tests for GitHub HTTP client and helpers.

Tests the shared HTTP client singleton, rate limit parsing and error
response processing.
"""

from __future__ import annotations

import httpx
import pytest

from devstats.services.github.exceptions import GitHubAPIError
from devstats.services.github.helpers import RateLimitInfo, handle_error_response
from devstats.services.github.http_client import close_github_client, get_github_client
from tests.helpers.factories import make_response


# ═══════════════════════════════════════════════════════════════════════════
# RateLimitInfo
# ═══════════════════════════════════════════════════════════════════════════


class TestRateLimitInfo:
    """Tests for rate limit header parsing."""

    def test_extracts_remaining_and_reset(self):
        resp = make_response(
            headers={
                "X-RateLimit-Remaining": "42",
                "X-RateLimit-Reset": "1700000000",
            }
        )
        info = RateLimitInfo(resp)

        assert info.remaining == "42"
        assert info.reset_timestamp == 1700000000
        assert info.is_exhausted is False

    def test_detects_exhausted(self):
        resp = make_response(headers={"X-RateLimit-Remaining": "0"})

        assert RateLimitInfo(resp).is_exhausted is True

    def test_missing_headers(self):
        info = RateLimitInfo(make_response(headers={}))

        assert info.remaining is None
        assert info.reset_timestamp is None
        assert info.is_exhausted is False


# ═══════════════════════════════════════════════════════════════════════════
# handle_error_response
# ═══════════════════════════════════════════════════════════════════════════


class TestHandleErrorResponse:
    """Tests for centralized GitHub API error handling."""

    @pytest.mark.parametrize("status_code", [200, 201, 204])
    def test_success_does_nothing(self, status_code):
        handle_error_response(make_response(status_code=status_code), "owner/repo")

    def test_401_raises_auth_error(self):
        with pytest.raises(GitHubAPIError, match="Invalid or expired"):
            handle_error_response(make_response(status_code=401), "owner/repo")

    def test_404_raises_not_found(self):
        with pytest.raises(GitHubAPIError, match="not found: owner/repo"):
            handle_error_response(make_response(status_code=404), "owner/repo")

    def test_403_with_rate_limit_exhausted(self):
        resp = make_response(
            status_code=403,
            headers={"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "1700000000"},
        )
        with pytest.raises(GitHubAPIError, match="rate limit") as exc_info:
            handle_error_response(resp, "owner/repo")

        assert exc_info.value.rate_limit_reset == 1700000000

    def test_403_without_rate_limit_raises_forbidden(self):
        resp = make_response(status_code=403, headers={"X-RateLimit-Remaining": "50"})
        with pytest.raises(GitHubAPIError, match="forbidden"):
            handle_error_response(resp, "owner/repo")

    def test_500_raises_generic_error(self):
        with pytest.raises(GitHubAPIError, match="500") as exc_info:
            handle_error_response(make_response(status_code=500), "owner/repo")

        assert exc_info.value.status_code == 500


# ═══════════════════════════════════════════════════════════════════════════
# HTTP Client Singleton
# ═══════════════════════════════════════════════════════════════════════════


class TestGitHubHttpClient:
    """Tests for the shared HTTP client singleton."""

    @pytest.mark.asyncio
    async def test_client_is_reused_until_closed(self):
        import devstats.services.github.http_client as mod

        original = mod._client
        mod._client = None

        try:
            client = get_github_client()
            assert isinstance(client, httpx.AsyncClient)
            assert client.timeout.connect == 5.0
            assert get_github_client() is client

            await close_github_client()
            assert client.is_closed
            assert mod._client is None

            replacement = get_github_client()
            assert replacement is not client
        finally:
            await close_github_client()
            mod._client = original

    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self):
        import devstats.services.github.http_client as mod

        original = mod._client
        mod._client = None
        try:
            await close_github_client()
            assert mod._client is None
        finally:
            mod._client = original
