"""Shared helpers for unit tests."""

from typing import Any

from github_user_search.github.abc import GitHubUserSearchClientBase
from github_user_search.search.models import SearchPage


def make_users(count: int, prefix: str = "user", start: int = 0) -> list[dict[str, Any]]:
    """Build search result user objects shaped like the GitHub API returns them."""
    return [
        {
            "id": start + index,
            "login": f"{prefix}{start + index}",
            "avatar_url": f"https://avatars.githubusercontent.com/u/{start + index}",
            "type": "User",
            "score": 1.0,
        }
        for index in range(count)
    ]


def make_search_page(count: int, total_count: int, page: int = 1, per_page: int = 30, prefix: str = "user") -> SearchPage:
    """Build a search page whose users are numbered from their position in the full result set."""
    return SearchPage(
        items=make_users(count, prefix=prefix, start=(page - 1) * per_page),
        total_count=total_count,
        page=page,
        per_page=per_page,
    )


class FakeSearchClient(GitHubUserSearchClientBase):
    """Search client returning scripted pages and profiles in order."""

    def __init__(
        self,
        pages: list[SearchPage | Exception] | None = None,
        profiles: dict[str, dict[str, Any] | Exception] | None = None,
    ) -> None:
        """Initialize the client with the pages and profiles to return."""
        self.pages = list(pages or [])
        self.profiles = profiles or {}
        self.search_calls: list[tuple[str, int, int]] = []
        self.profile_calls: list[str] = []
        self.closed = False

    async def search_users(self, query: str, page: int = 1, per_page: int = 30) -> SearchPage:
        """Return the next scripted page, or raise it if it is an exception."""
        self.search_calls.append((query, page, per_page))
        result = self.pages.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    async def get_user_by_username(self, username: str) -> dict[str, Any]:
        """Return the scripted profile for a username, or raise it if it is an exception."""
        self.profile_calls.append(username)
        result = self.profiles[username]
        if isinstance(result, Exception):
            raise result
        return result

    def close(self) -> None:
        """Record that the client was closed."""
        self.closed = True
