"""Local persistence of the current search query."""

from .query_store import QueryStore

__all__ = ["QueryStore"]
