"""Custom exceptions for the search module."""


class UserDetailsError(Exception):
    """Raised when the full profile of a user cannot be fetched."""

    def __init__(self, login: str, reason: str) -> None:
        """Initializes the exception with the login and the failure description."""
        super().__init__(f"Failed to fetch details for user '{login}': {reason}")
        self.login = login
        self.reason = reason
