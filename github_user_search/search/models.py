"""Data models for the user search state machine."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict


class SearchPage(BaseModel):
    """One decoded page of the GitHub Search Users endpoint.

    The user objects in ``items`` are passed through exactly as GitHub returned
    them. ``page`` and ``per_page`` record what was requested so that the
    continuation check can be computed without any other context.
    """

    model_config = ConfigDict(extra="ignore")

    items: list[dict[str, Any]]
    total_count: int
    incomplete_results: bool = False
    page: int
    per_page: int

    @property
    def has_more(self) -> bool:
        """Whether another page may exist after this one.

        Both conditions must hold: a short page means GitHub has nothing left
        to give even when ``total_count`` says otherwise, and a full page at the
        exact end of ``total_count`` must not trigger another request.
        """
        return len(self.items) == self.per_page and self.page * self.per_page < self.total_count


@dataclass(frozen=True)
class SearchState:
    """Snapshot of the search controller state."""

    items: tuple[dict[str, Any], ...] = ()
    loading: bool = False
    error: str | None = None
    has_more: bool = True
    page: int = 1


@dataclass(frozen=True)
class SearchSuccess:
    """A search request completed and its page was applied to the state."""

    sequence: int
    page: SearchPage
    appended: bool


@dataclass(frozen=True)
class SearchFailure:
    """A search request failed and its error was applied to the state."""

    sequence: int
    error: str
    appended: bool


@dataclass(frozen=True)
class SearchDiscarded:
    """A search request completed after a newer one was issued and was ignored."""

    sequence: int
    latest_sequence: int


SearchOutcome = SearchSuccess | SearchFailure | SearchDiscarded
