"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_QUERY,
    QUERY_STORE_KEY,
    SCROLL_THRESHOLD,
    SEARCH_PAGE_SIZE,
)

__all__ = [
    "DEFAULT_GITHUB_API_URL",
    "DEFAULT_QUERY",
    "QUERY_STORE_KEY",
    "SCROLL_THRESHOLD",
    "SEARCH_PAGE_SIZE",
]
