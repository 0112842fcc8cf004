"""Pytest configuration for integration tests."""

import os
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from dotenv import load_dotenv

from github_user_search.github.adapter import PyGithubAdapter
from github_user_search.utils.constants import DEFAULT_GITHUB_API_URL

INTEGRATION_FLAG = "GITHUB_USER_SEARCH_INTEGRATION"


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip live GitHub tests unless they were enabled explicitly.

    The tests run unauthenticated against the public API, whose search
    endpoint allows only a handful of requests per minute.
    """
    project_root = Path(__file__).parent.parent.parent
    for env_file in (project_root / ".env.integration", project_root / ".env"):
        if env_file.exists():
            load_dotenv(dotenv_path=env_file)

    if os.getenv(INTEGRATION_FLAG):
        return
    skip_live = pytest.mark.skip(reason=f"set {INTEGRATION_FLAG}=1 to run tests against the live GitHub API")
    integration_dir = Path(__file__).parent
    for item in items:
        if integration_dir in item.path.parents:
            item.add_marker(skip_live)


@pytest_asyncio.fixture
async def github_adapter() -> AsyncGenerator[PyGithubAdapter, None]:
    """Adapter talking to the GitHub API named by GITHUB_API_URL."""
    adapter = await PyGithubAdapter.create(github_api_url=os.getenv("GITHUB_API_URL", DEFAULT_GITHUB_API_URL))
    yield adapter
    adapter.close()
