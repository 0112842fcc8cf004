"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from github_user_search.utils import constants


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = constants.DEFAULT_GITHUB_API_URL
    PER_PAGE: int = constants.SEARCH_PAGE_SIZE
    DEFAULT_QUERY: str = constants.DEFAULT_QUERY

    # Search session settings
    DEBOUNCE_SECONDS: float = constants.DEFAULT_DEBOUNCE_SECONDS
    SCROLL_THRESHOLD: float = constants.SCROLL_THRESHOLD
    QUERY_STORE_PATH: Path = constants.DEFAULT_QUERY_STORE_PATH
