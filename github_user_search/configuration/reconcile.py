"""Reconciles configuration between CLI arguments and environment variables."""

from pathlib import Path

import structlog

from github_user_search.configuration.env import Settings
from github_user_search.configuration.exceptions import InvalidConfigurationElementError
from github_user_search.configuration.models import SearchConfig
from github_user_search.utils.constants import MAX_SEARCH_PAGE_SIZE

logger = structlog.get_logger(__name__)


async def reconcile_search_configuration(
    cli_debug: bool | None = None,
    cli_github_api_url: str | None = None,
    cli_per_page: int | None = None,
    cli_default_query: str | None = None,
    cli_query_store_path: Path | None = None,
    settings: Settings | None = None,
) -> SearchConfig:
    """Reconciles the search configuration.

    Values given on the command line take precedence over environment
    variables, which in turn take precedence over built-in defaults.

    Args:
        cli_debug (bool | None): The --debug option.
        cli_github_api_url (str | None): The --github-api-url option.
        cli_per_page (int | None): The --per-page option.
        cli_default_query (str | None): The --default-query option.
        cli_query_store_path (Path | None): The --query-store-path option.
        settings (Settings | None): Environment settings; read from the environment when omitted.

    Raises:
        InvalidConfigurationElementError: If a reconciled value is unusable.

    Returns:
        SearchConfig: The reconciled configuration.
    """
    if settings is None:
        settings = Settings()

    config = SearchConfig(
        debug=cli_debug if cli_debug is not None else settings.DEBUG,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        per_page=cli_per_page if cli_per_page is not None else settings.PER_PAGE,
        default_query=cli_default_query if cli_default_query is not None else settings.DEFAULT_QUERY,
        debounce_seconds=settings.DEBOUNCE_SECONDS,
        scroll_threshold=settings.SCROLL_THRESHOLD,
        query_store_path=cli_query_store_path or settings.QUERY_STORE_PATH,
    )
    await validate_search_configuration(config)
    logger.debug("Reconciled search configuration", github_api_url=config.github_api_url, per_page=config.per_page)
    return config


async def validate_search_configuration(config: SearchConfig) -> None:
    """Validates a reconciled search configuration.

    Raises:
        InvalidConfigurationElementError: If any element is out of range or empty.
    """
    if not config.github_api_url.startswith(("http://", "https://")):
        raise InvalidConfigurationElementError(
            "GitHub API URL", "github_api_url", "GITHUB_API_URL", f"'{config.github_api_url}' is not an http(s) URL"
        )
    if not 1 <= config.per_page <= MAX_SEARCH_PAGE_SIZE:
        raise InvalidConfigurationElementError(
            "results per page", "per_page", "PER_PAGE", f"must be between 1 and {MAX_SEARCH_PAGE_SIZE}, got {config.per_page}"
        )
    if not config.default_query.strip():
        raise InvalidConfigurationElementError("default query", "default_query", "DEFAULT_QUERY", "must not be empty")
    if config.debounce_seconds < 0:
        raise InvalidConfigurationElementError("debounce delay", "-", "DEBOUNCE_SECONDS", "must not be negative")
    if config.scroll_threshold < 0:
        raise InvalidConfigurationElementError("scroll threshold", "-", "SCROLL_THRESHOLD", "must not be negative")
