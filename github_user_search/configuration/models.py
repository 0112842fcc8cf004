"""Reconciled configuration models."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class SearchConfig:
    """Configuration class for the GitHub User Search CLI."""

    debug: bool
    github_api_url: str
    per_page: int
    default_query: str
    debounce_seconds: float
    scroll_threshold: float
    query_store_path: Path
