"""Shared constants used across the application."""

from pathlib import Path

# GitHub API Constants
# --------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Base URL of the public GitHub REST API."""

SEARCH_PAGE_SIZE = 30
"""Number of users requested per search page (the per_page query parameter)."""

MAX_SEARCH_PAGE_SIZE = 100
"""Largest per_page value accepted by the GitHub Search API."""

DEFAULT_QUERY = "USERNAME"
"""Query sent in place of an empty or whitespace-only search string."""

# Search Session Constants
# ------------------------

DEFAULT_DEBOUNCE_SECONDS = 0.5
"""Time the query must stay unchanged before a search is issued."""

SCROLL_THRESHOLD = 1000
"""Distance from the bottom of the document, in viewport units, that triggers loading the next page."""

CARD_HEIGHT = 120
"""Height of one rendered user card, in viewport units."""

VIEWPORT_HEIGHT = 900
"""Height of the visible viewport used by the terminal front end, in viewport units."""

# Persistence Constants
# ---------------------

QUERY_STORE_KEY = "search-query"
"""Key under which the raw query string is persisted."""

DEFAULT_QUERY_STORE_PATH = Path.home() / ".github-user-search.yaml"
"""Default location of the persisted query file."""

# Rendering Constants
# -------------------

NO_USERS_MESSAGE = "No users found\nTry searching for a different username"
"""Shown when a search returns no users."""

END_OF_RESULTS_MESSAGE = "You've reached the end! No more users to load."
"""Shown once the last page of results has been loaded."""
