# This file is intended to hold the setup for the PyGithub client.

"""Sets up the unauthenticated PyGithub client."""

from github import Github

from github_user_search.utils.constants import DEFAULT_GITHUB_API_URL, SEARCH_PAGE_SIZE


async def get_github_client(github_api_url: str = DEFAULT_GITHUB_API_URL, per_page: int = SEARCH_PAGE_SIZE) -> Github:
    """Returns an unauthenticated GitHub client for the given API URL.

    Automatic retries are disabled, so every call hits the API once and
    failures, rate limits included, reach the caller.
    """
    if not github_api_url:
        raise RuntimeError("A GitHub API URL is required to create a client.")
    return Github(base_url=github_api_url, per_page=per_page, retry=None)
