"""Infinite scroll: viewport observation and the near-bottom continuation trigger."""

import asyncio
import inspect
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Awaitable, Callable

import structlog

from github_user_search.utils.constants import SCROLL_THRESHOLD

from .models import SearchState

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ViewportMetrics:
    """Scroll position of a viewport over a document, in viewport units."""

    scroll_top: float
    viewport_height: float
    document_height: float

    @property
    def distance_to_bottom(self) -> float:
        """Distance between the bottom edge of the viewport and the end of the document."""
        return self.document_height - (self.scroll_top + self.viewport_height)


ScrollListener = Callable[[ViewportMetrics], None]


class Subscription:
    """Handle for a listener registered on a ScrollEvents source."""

    def __init__(self, events: "ScrollEvents", listener: ScrollListener) -> None:
        self._events = events
        self._listener = listener
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Stop delivering events to the listener. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._events._remove(self._listener)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.unsubscribe()


class ScrollEvents:
    """Publishes viewport scroll positions to subscribed listeners."""

    def __init__(self) -> None:
        self._listeners: list[ScrollListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ScrollListener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(self, listener)

    def publish(self, metrics: ViewportMetrics) -> None:
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(metrics)

    def _remove(self, listener: ScrollListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)


class ScrollTrigger:
    """Calls a continuation when the viewport comes within ``threshold`` of the document end.

    The continuation runs at most once per crossing into the near-bottom zone,
    and only while the search state reports more pages and no request in
    flight. A crossing that is blocked by those checks is not consumed. The
    trigger re-arms when the viewport leaves the zone or the document height
    changes, which is what happens when a new page is rendered.
    """

    def __init__(
        self,
        events: ScrollEvents,
        get_state: Callable[[], SearchState],
        on_threshold: Callable[[], Awaitable[Any] | None],
        threshold: float = SCROLL_THRESHOLD,
    ) -> None:
        """Initialize the trigger and subscribe it to ``events``.

        Args:
            events: Source of viewport scroll positions
            get_state: Returns the current search state
            on_threshold: Continuation to call; awaitables are scheduled as tasks
            threshold: Distance from the document end that counts as near the bottom
        """
        self.get_state = get_state
        self.on_threshold = on_threshold
        self.threshold = threshold
        self._fired_at_height: float | None = None
        self._tasks: set[asyncio.Future[Any]] = set()
        self._subscription = events.subscribe(self._on_scroll)

    @property
    def active(self) -> bool:
        return self._subscription.active

    def is_near_bottom(self, metrics: ViewportMetrics) -> bool:
        return metrics.viewport_height + metrics.scroll_top >= metrics.document_height - self.threshold

    def rearm(self) -> None:
        """Forget the last crossing, so the next near-bottom event fires again.

        Called when the result list is replaced by a fresh search, whose
        document may happen to have the same height as the previous one.
        """
        self._fired_at_height = None

    def close(self) -> None:
        """Unsubscribe from scroll events."""
        self._subscription.unsubscribe()

    async def drain(self) -> None:
        """Wait until every continuation scheduled so far has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def __enter__(self) -> "ScrollTrigger":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _on_scroll(self, metrics: ViewportMetrics) -> None:
        if not self.is_near_bottom(metrics):
            self._fired_at_height = None
            return
        if self._fired_at_height == metrics.document_height:
            return
        state = self.get_state()
        if not state.has_more or state.loading:
            return

        self._fired_at_height = metrics.document_height
        logger.debug("Scroll threshold crossed", distance_to_bottom=metrics.distance_to_bottom, page=state.page)
        result = self.on_threshold()
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Future[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Scroll continuation failed", error=str(exc), error_type=type(exc).__name__)
