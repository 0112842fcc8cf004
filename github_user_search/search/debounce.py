"""Debounce rapidly changing input before it reaches the search controller."""

import asyncio
from typing import Any, Awaitable, Callable, Generic, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class Debouncer(Generic[T]):
    """Delays a value until it has been stable for ``delay`` seconds.

    Each ``push`` cancels the pending timer, so superseded values are dropped
    rather than queued. Once a value settles, ``on_settle`` runs as its own
    task; a later ``push`` never cancels a settle that is already running.
    """

    def __init__(self, delay: float, on_settle: Callable[[T], Awaitable[Any]], value: T | None = None) -> None:
        """Initialize the debouncer.

        Args:
            delay: Seconds the input must stay unchanged before it settles
            on_settle: Coroutine function called with each settled value
            value: Initial settled value
        """
        if delay < 0:
            raise ValueError("Debounce delay must not be negative.")
        self.delay = delay
        self.on_settle = on_settle
        self.value = value
        self._timer: asyncio.Task[None] | None = None
        # Boxed so a pending None is told apart from no pending value
        self._pending: tuple[T] | None = None
        self._running: set[asyncio.Future[Any]] = set()

    @property
    def pending(self) -> bool:
        """Whether a value is waiting for its delay to elapse."""
        return self._timer is not None and not self._timer.done()

    def push(self, value: T) -> None:
        """Replace any pending value with ``value`` and restart the delay."""
        self.cancel()
        self._pending = (value,)
        self._timer = asyncio.get_running_loop().create_task(self._wait_then_settle(value))

    def flush(self) -> None:
        """Settle the pending value immediately, if there is one."""
        pending = self._pending
        if not self.pending or pending is None:
            return
        self.cancel()
        self._settle(pending[0])

    def cancel(self) -> None:
        """Drop the pending value without settling it."""
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None
        self._pending = None

    async def aclose(self) -> None:
        """Cancel the pending value and wait for running settle callbacks to finish."""
        self.cancel()
        if self._running:
            await asyncio.gather(*self._running, return_exceptions=True)

    async def _wait_then_settle(self, value: T) -> None:
        await asyncio.sleep(self.delay)
        self._timer = None
        self._pending = None
        self._settle(value)

    def _settle(self, value: T) -> None:
        self.value = value
        logger.debug("Debounced value settled", value=value)
        task = asyncio.ensure_future(self.on_settle(value))
        self._running.add(task)
        task.add_done_callback(self._on_settle_done)

    def _on_settle_done(self, task: asyncio.Future[Any]) -> None:
        self._running.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Debounced callback failed", error=str(exc), error_type=type(exc).__name__)
