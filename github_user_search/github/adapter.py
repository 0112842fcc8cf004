"""GitHub client adapter for the PyGithub library."""

import asyncio
import json
from functools import wraps
from http import HTTPStatus
from typing import Any, Awaitable, Callable, Self, TypeVar

import requests
import structlog
from github import Github, GithubException
from pydantic import ValidationError

from github_user_search.search.models import SearchPage
from github_user_search.utils.constants import DEFAULT_GITHUB_API_URL, SEARCH_PAGE_SIZE

from .abc import GitHubUserSearchClientBase
from .client import get_github_client
from .exceptions import GitHubRequestError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def status_text(status_code: int) -> str:
    """Return the standard reason phrase for an HTTP status code, or an empty string."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def handle_github_errors(func: F) -> F:
    """Decorator normalizing PyGithub, transport and decoding failures into GitHubRequestError."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except GithubException as exc:
            reason = status_text(exc.status)
            logger.error(
                "GitHub request failed",
                function=func.__name__,
                status_code=exc.status,
                reason=reason,
                message=exc.message,
            )
            raise GitHubRequestError(f"Error: {exc.status} {reason}".rstrip(), status_code=exc.status) from exc
        except requests.RequestException as exc:
            logger.error("GitHub transport error", function=func.__name__, error=str(exc), error_type=type(exc).__name__)
            raise GitHubRequestError(f"Error: {exc}") from exc
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.error("Could not decode GitHub response", function=func.__name__, error=str(exc))
            raise GitHubRequestError(f"Error: invalid response from GitHub: {exc}") from exc

    return wrapper  # type: ignore


class PyGithubAdapter(GitHubUserSearchClientBase):
    """GitHub client adapter for the PyGithub library.

    PyGithub is blocking, so every call runs in a worker thread to keep the
    event loop responsive while a request is in flight.
    """

    def __init__(self, client: Github) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client

    @classmethod
    async def create(cls, github_api_url: str = DEFAULT_GITHUB_API_URL, per_page: int = SEARCH_PAGE_SIZE) -> Self:
        """Create a new GitHub client adapter.

        Args:
            github_api_url: GitHub API URL (defaults to https://api.github.com)
            per_page: Default page size of the underlying client

        Returns:
            Configured PyGithubAdapter instance
        """
        logger.info("Creating client for GitHub instance", github_api_url=github_api_url)
        client = await get_github_client(github_api_url=github_api_url, per_page=per_page)
        return cls(client)

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self.client.close()

    @handle_github_errors
    async def search_users(self, query: str, page: int = 1, per_page: int = SEARCH_PAGE_SIZE) -> SearchPage:
        """Search GitHub users.

        Args:
            query: Search query, sent as the ``q`` parameter unchanged
            page: 1-based page number to request
            per_page: Number of users per page

        Returns:
            The decoded page, with user objects exactly as returned by GitHub

        Raises:
            GitHubRequestError: If the request fails or the body is not a search result
        """
        logger.debug("Searching GitHub users", query=query, page=page, per_page=per_page)
        data = await asyncio.to_thread(self._get_json, "/search/users", {"q": query, "page": page, "per_page": per_page})
        if not isinstance(data, dict):
            raise GitHubRequestError(f"Error: unexpected search response of type {type(data).__name__}")
        search_page = SearchPage.model_validate({**data, "page": page, "per_page": per_page})
        logger.debug(
            "Received GitHub user search page",
            query=query,
            page=page,
            returned=len(search_page.items),
            total_count=search_page.total_count,
            incomplete_results=search_page.incomplete_results,
        )
        return search_page

    @handle_github_errors
    async def get_user_by_username(self, username: str) -> dict[str, Any]:
        """Get the full profile of a GitHub user by username."""
        logger.debug("Fetching GitHub user profile", username=username)
        user = await asyncio.to_thread(self.client.get_user, username)
        return user.raw_data

    def _get_json(self, url: str, parameters: dict[str, Any]) -> Any:
        # Raw JSON keeps the user objects as GitHub sent them
        _, data = self.client.requester.requestJsonAndCheck("GET", url, parameters=parameters)
        return data
