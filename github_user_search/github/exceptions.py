"""Contains exceptions raised when talking to the GitHub API."""


class GitHubRequestError(Exception):
    """Raised when a GitHub request fails or its response body cannot be decoded.

    The message is the single human readable description surfaced to users,
    e.g. ``Error: 403 Forbidden``.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initializes the exception with a message and the HTTP status code, if any."""
        super().__init__(message)
        self.message = message
        self.status_code = status_code
