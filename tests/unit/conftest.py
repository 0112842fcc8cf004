"""Fixtures for unit tests."""

from pathlib import Path
from typing import Generator

import pytest
import structlog

from github_user_search.storage.query_store import QueryStore


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Route structlog through the standard library so caplog sees search events."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def query_store_path(tmp_path: Path) -> Path:
    """Path of a query store file that does not exist yet."""
    return tmp_path / "state" / "query.yaml"


@pytest.fixture
def query_store(query_store_path: Path) -> QueryStore:
    """Query store backed by a temporary file."""
    return QueryStore(query_store_path)
