"""Search session wiring the query store, debouncer, controller and scroll trigger together."""

from typing import Any

import structlog

from github_user_search.search.controller import SearchController
from github_user_search.search.debounce import Debouncer
from github_user_search.search.exceptions import UserDetailsError
from github_user_search.search.models import SearchOutcome, SearchState
from github_user_search.search.scroll import ScrollEvents, ScrollTrigger, ViewportMetrics
from github_user_search.storage.query_store import QueryStore
from github_user_search.utils.constants import CARD_HEIGHT, DEFAULT_DEBOUNCE_SECONDS, SCROLL_THRESHOLD, VIEWPORT_HEIGHT

logger = structlog.get_logger(__name__)


class SearchSession:
    """One interactive search: typed query in, paginated users and details out.

    The raw query is persisted on every change, while searches only run for
    the debounced value. Scrolling near the end of the rendered results loads
    the next page for the debounced query.
    """

    def __init__(
        self,
        controller: SearchController,
        store: QueryStore,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        scroll_threshold: float = SCROLL_THRESHOLD,
        events: ScrollEvents | None = None,
    ) -> None:
        self.controller = controller
        self.store = store
        self.events = events or ScrollEvents()
        self.query = ""
        self.initial_loaded = False
        self.debouncer: Debouncer[str] = Debouncer(debounce_seconds, self._on_query_settled, value="")
        self.scroll_trigger = ScrollTrigger(self.events, lambda: self.controller.state, self._load_more, threshold=scroll_threshold)

    @property
    def state(self) -> SearchState:
        return self.controller.state

    @property
    def debounced_query(self) -> str:
        return self.debouncer.value or ""

    async def start(self, query: str | None = None) -> SearchOutcome:
        """Run the initial search for ``query``, or for the stored query when none is given."""
        if query is None:
            query = self.store.load()
        else:
            self.store.save(query)
        self.query = query
        self.debouncer.value = query
        logger.info("Starting search session", query=query)
        outcome = await self.controller.search(query)
        self.scroll_trigger.rearm()
        self.initial_loaded = True
        return outcome

    def set_query(self, text: str) -> None:
        """Record a change of the typed query; the search follows once it settles."""
        self.query = text
        self.store.save(text)
        self.debouncer.push(text)

    def scroll(self, metrics: ViewportMetrics) -> None:
        """Report a new viewport position."""
        self.events.publish(metrics)

    def scroll_to_end(self, viewport_height: float = VIEWPORT_HEIGHT, card_height: float = CARD_HEIGHT) -> ViewportMetrics:
        """Scroll to the end of the rendered results, laid out as fixed-height cards."""
        document_height = len(self.controller.state.items) * card_height
        metrics = ViewportMetrics(
            scroll_top=max(0.0, document_height - viewport_height),
            viewport_height=viewport_height,
            document_height=document_height,
        )
        self.scroll(metrics)
        return metrics

    async def select_user(self, user: dict[str, Any]) -> dict[str, Any] | None:
        """Fetch the detail view for a user; failures are logged and yield None."""
        login = user.get("login", "")
        try:
            return await self.controller.fetch_details(login)
        except UserDetailsError as exc:
            logger.error("Failed to fetch user details", login=login, error=exc.reason)
            return None

    async def close(self) -> None:
        """Stop observing scroll events and cancel any pending query."""
        self.scroll_trigger.close()
        await self.debouncer.aclose()
        await self.scroll_trigger.drain()

    async def _on_query_settled(self, query: str) -> None:
        await self.controller.search(query)
        self.scroll_trigger.rearm()

    async def _load_more(self) -> SearchOutcome | None:
        return await self.controller.load_more(self.debounced_query)
