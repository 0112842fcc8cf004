"""Search and pagination controller for GitHub user search."""

from dataclasses import replace
from typing import Any

import structlog

from github_user_search.github.abc import GitHubUserSearchClientBase
from github_user_search.github.exceptions import GitHubRequestError
from github_user_search.utils.constants import DEFAULT_QUERY, SEARCH_PAGE_SIZE

from .exceptions import UserDetailsError
from .models import SearchDiscarded, SearchFailure, SearchOutcome, SearchState, SearchSuccess

logger = structlog.get_logger(__name__)


class SearchController:
    """Owns the search result list, the loading/error flags and the page cursor.

    State only changes through ``search`` and ``load_more``. Each request is
    tagged with a sequence number when it is issued; when a response arrives
    for anything but the most recently issued request it is discarded, so a
    slow earlier search can never overwrite fresher results.
    """

    def __init__(
        self,
        client: GitHubUserSearchClientBase,
        per_page: int = SEARCH_PAGE_SIZE,
        default_query: str = DEFAULT_QUERY,
    ) -> None:
        """Initialize the controller.

        Args:
            client: GitHub client used to run searches and fetch profiles
            per_page: Number of users requested per page
            default_query: Query sent when the user query is empty or whitespace
        """
        self.client = client
        self.per_page = per_page
        self.default_query = default_query
        self._state = SearchState()
        self._sequence = 0

    @property
    def state(self) -> SearchState:
        """Current immutable snapshot of the search state."""
        return self._state

    @property
    def latest_sequence(self) -> int:
        """Sequence number of the most recently issued request."""
        return self._sequence

    def resolve_query(self, query: str) -> str:
        """Return the query to send to GitHub, substituting the default for blank input."""
        return query.strip() or self.default_query

    async def search(self, query: str) -> SearchOutcome:
        """Start a fresh search, replacing the current result list with page 1."""
        sequence = self._issue()
        self._state = replace(self._state, page=1, loading=True, error=None)
        return await self._fetch_page(query, page=1, sequence=sequence, append=False)

    async def load_more(self, query: str) -> SearchOutcome | None:
        """Fetch the next page and append it to the result list.

        Returns None without touching the state when a request is already in
        flight or the last response reported that no further pages exist.
        """
        if self._state.loading or not self._state.has_more:
            logger.debug("Skipping load more", loading=self._state.loading, has_more=self._state.has_more, page=self._state.page)
            return None
        sequence = self._issue()
        page = self._state.page + 1
        self._state = replace(self._state, page=page, loading=True, error=None)
        return await self._fetch_page(query, page=page, sequence=sequence, append=True)

    async def fetch_details(self, login: str) -> dict[str, Any]:
        """Fetch the full profile of a single user without touching the search state.

        Raises:
            UserDetailsError: If the login is blank or the profile cannot be fetched
        """
        if not login or not login.strip():
            raise UserDetailsError(login, "login must not be empty")
        try:
            return await self.client.get_user_by_username(login.strip())
        except GitHubRequestError as exc:
            logger.error("Failed to fetch user details", login=login, error=str(exc))
            raise UserDetailsError(login, str(exc)) from exc

    def _issue(self) -> int:
        self._sequence += 1
        return self._sequence

    async def _fetch_page(self, query: str, page: int, sequence: int, append: bool) -> SearchOutcome:
        search_query = self.resolve_query(query)
        logger.info("Requesting user search page", query=search_query, page=page, sequence=sequence, append=append)
        try:
            result = await self.client.search_users(search_query, page=page, per_page=self.per_page)
        except GitHubRequestError as exc:
            if sequence != self._sequence:
                logger.info("Discarding stale search failure", sequence=sequence, latest_sequence=self._sequence)
                return SearchDiscarded(sequence=sequence, latest_sequence=self._sequence)
            logger.warning("User search failed", query=search_query, page=page, error=str(exc))
            # A failed continuation keeps what was already loaded
            items = self._state.items if append else ()
            self._state = replace(self._state, items=items, loading=False, error=str(exc))
            return SearchFailure(sequence=sequence, error=str(exc), appended=append)

        if sequence != self._sequence:
            logger.info("Discarding stale search response", sequence=sequence, latest_sequence=self._sequence)
            return SearchDiscarded(sequence=sequence, latest_sequence=self._sequence)

        items = self._state.items + tuple(result.items) if append else tuple(result.items)
        self._state = replace(self._state, items=items, loading=False, has_more=result.has_more)
        logger.info(
            "Applied user search page",
            query=search_query,
            page=page,
            returned=len(result.items),
            total_items=len(items),
            total_count=result.total_count,
            has_more=result.has_more,
        )
        return SearchSuccess(sequence=sequence, page=result, appended=append)
