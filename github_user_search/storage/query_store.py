"""Persists the raw search query string under a single key."""

from pathlib import Path

import structlog
from ruamel.yaml.error import YAMLError

from github_user_search.utils.constants import QUERY_STORE_KEY
from github_user_search.utils.yaml import dump_yaml_to_file, load_yaml_file

logger = structlog.get_logger(__name__)


class QueryStore:
    """Reads and writes the current query string in a small YAML file.

    The string is stored exactly as typed, surrounding whitespace included.
    A missing, unreadable or malformed file reads as an empty query.
    """

    def __init__(self, path: Path, key: str = QUERY_STORE_KEY) -> None:
        self.path = path
        self.key = key

    def load(self) -> str:
        if not self.path.exists():
            return ""
        try:
            data = load_yaml_file(self.path)
        except (OSError, YAMLError) as exc:
            logger.warning("Could not read stored search query", path=str(self.path), error=str(exc))
            return ""
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed search query file", path=str(self.path))
            return ""
        value = data.get(self.key)
        return value if isinstance(value, str) else ""

    def save(self, query: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        dump_yaml_to_file({self.key: query}, self.path)
        logger.debug("Stored search query", path=str(self.path), query=query)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
