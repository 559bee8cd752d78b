"""Root conftest — shared fixtures for all devstats tests."""

from __future__ import annotations

import pytest

from devstats.config.settings import Settings
from tests.helpers.factories import REPO, TOKEN, WEBHOOK_URL


@pytest.fixture
def settings() -> Settings:
    """Settings built from explicit values, never from os.environ or .env."""
    return Settings(
        _env_file=None,
        webhook_url=WEBHOOK_URL,
        github_token=TOKEN,
        github_repo=REPO,
    )
