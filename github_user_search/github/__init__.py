"""GitHub API access for user search."""

from .adapter import PyGithubAdapter
from .exceptions import GitHubRequestError

__all__ = ["PyGithubAdapter", "GitHubRequestError"]
