"""Unit tests for the configuration.reconcile module."""

from pathlib import Path
from typing import Any

import pytest

from github_user_search.configuration.env import Settings
from github_user_search.configuration.exceptions import InvalidConfigurationElementError
from github_user_search.configuration.models import SearchConfig
from github_user_search.configuration.reconcile import reconcile_search_configuration, validate_search_configuration


def make_settings(**overrides: Any) -> Settings:
    """Build settings from explicit values only, ignoring any .env file."""
    values: dict[str, Any] = {
        "DEBUG": False,
        "GITHUB_API_URL": "https://api.github.com",
        "PER_PAGE": 30,
        "DEFAULT_QUERY": "USERNAME",
        "DEBOUNCE_SECONDS": 0.5,
        "SCROLL_THRESHOLD": 1000,
        "QUERY_STORE_PATH": Path("/tmp/env-query.yaml"),
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_config(**overrides: Any) -> SearchConfig:
    """Build a valid configuration with selected elements replaced."""
    values: dict[str, Any] = {
        "debug": False,
        "github_api_url": "https://api.github.com",
        "per_page": 30,
        "default_query": "USERNAME",
        "debounce_seconds": 0.5,
        "scroll_threshold": 1000,
        "query_store_path": Path("/tmp/query.yaml"),
    }
    values.update(overrides)
    return SearchConfig(**values)


@pytest.mark.asyncio
async def test_reconcile_with_env_vars() -> None:
    """Test reconciliation when values only come from environment variables."""
    # When
    result = await reconcile_search_configuration(
        settings=make_settings(DEBUG=True, PER_PAGE=50, DEFAULT_QUERY="type:user", DEBOUNCE_SECONDS=0.25, SCROLL_THRESHOLD=400)
    )

    # Then
    assert result == SearchConfig(
        debug=True,
        github_api_url="https://api.github.com",
        per_page=50,
        default_query="type:user",
        debounce_seconds=0.25,
        scroll_threshold=400,
        query_store_path=Path("/tmp/env-query.yaml"),
    )


@pytest.mark.asyncio
async def test_reconcile_with_cli_args() -> None:
    """Test that command line values take precedence over environment variables."""
    # When
    result = await reconcile_search_configuration(
        cli_debug=False,
        cli_github_api_url="https://github.example.com/api/v3",
        cli_per_page=100,
        cli_default_query="octo",
        cli_query_store_path=Path("/tmp/cli-query.yaml"),
        settings=make_settings(DEBUG=True, PER_PAGE=50),
    )

    # Then
    assert result.debug is False  # CLI value
    assert result.github_api_url == "https://github.example.com/api/v3"  # CLI value
    assert result.per_page == 100  # CLI value
    assert result.default_query == "octo"  # CLI value
    assert result.query_store_path == Path("/tmp/cli-query.yaml")  # CLI value
    assert result.debounce_seconds == 0.5  # environment only


@pytest.mark.asyncio
async def test_reconcile_rejects_invalid_cli_value() -> None:
    """Test that reconciled values are validated."""
    # When/Then
    with pytest.raises(InvalidConfigurationElementError) as exc_info:
        await reconcile_search_configuration(cli_per_page=0, settings=make_settings())

    assert exc_info.value.cli_name == "per_page"
    assert exc_info.value.env_name == "PER_PAGE"


@pytest.mark.asyncio
async def test_validate_accepts_defaults() -> None:
    """Test that the default configuration is valid."""
    await validate_search_configuration(make_config())


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides,env_name",
    [
        pytest.param({"github_api_url": "api.github.com"}, "GITHUB_API_URL", id="url without scheme"),
        pytest.param({"per_page": 0}, "PER_PAGE", id="page size too small"),
        pytest.param({"per_page": 101}, "PER_PAGE", id="page size too large"),
        pytest.param({"default_query": "   "}, "DEFAULT_QUERY", id="blank default query"),
        pytest.param({"debounce_seconds": -0.1}, "DEBOUNCE_SECONDS", id="negative debounce"),
        pytest.param({"scroll_threshold": -1}, "SCROLL_THRESHOLD", id="negative threshold"),
    ],
)
async def test_validate_rejects_invalid_element(overrides: dict[str, Any], env_name: str) -> None:
    """Test that each unusable element is reported with its environment variable."""
    # When/Then
    with pytest.raises(InvalidConfigurationElementError) as exc_info:
        await validate_search_configuration(make_config(**overrides))

    assert exc_info.value.env_name == env_name
    assert env_name in str(exc_info.value)
