"""Base ABC for GitHub user search clients."""

from abc import ABC, abstractmethod
from typing import Any

from github_user_search.search.models import SearchPage
from github_user_search.utils.constants import SEARCH_PAGE_SIZE


class GitHubUserSearchClientBase(ABC):
    """Base ABC for GitHub user search clients."""

    @abstractmethod
    async def search_users(self, query: str, page: int = 1, per_page: int = SEARCH_PAGE_SIZE) -> SearchPage:
        """Search GitHub users and return one page of results."""
        pass

    @abstractmethod
    async def get_user_by_username(self, username: str) -> dict[str, Any]:
        """Get the full profile of a GitHub user by username."""
        pass
