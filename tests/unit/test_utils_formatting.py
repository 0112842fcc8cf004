"""Unit tests for the text rendering helpers."""

import pytest

from github_user_search.utils.constants import NO_USERS_MESSAGE
from github_user_search.utils.formatting import format_score, format_user_card, format_user_details, format_user_list


@pytest.mark.parametrize(
    "score,expected",
    [
        (1.0, "1"),
        (19.4862, "19.49"),
        (0.5, "0.5"),
        (None, "0"),
        (0, "0"),
    ],
)
def test_format_score(score: float | None, expected: str) -> None:
    """Test that scores are rounded to two decimals and missing scores show as 0."""
    assert format_score(score) == expected


def test_format_user_card() -> None:
    """Test the text card of a search result."""
    user = {"login": "octocat", "id": 583231, "type": "User", "score": 1.0, "avatar_url": "https://example.com/a.png"}
    assert format_user_card(user) == "octocat  (ID: 583231)\n  User  Score: 1"


def test_format_user_card_without_score() -> None:
    """Test that a result without a score is still rendered."""
    assert format_user_card({"login": "github", "id": 9919, "type": "Organization"}) == "github  (ID: 9919)\n  Organization  Score: 0"


def test_format_user_list_keeps_order() -> None:
    """Test that cards are rendered in result order."""
    users = [{"login": "b", "id": 2}, {"login": "a", "id": 1}]
    rendered = format_user_list(users)
    assert rendered.index("b  (ID: 2)") < rendered.index("a  (ID: 1)")


def test_format_user_list_empty() -> None:
    """Test the hint shown when a search has no results."""
    assert format_user_list([]) == NO_USERS_MESSAGE
    assert NO_USERS_MESSAGE.startswith("No users found")


def test_format_user_details() -> None:
    """Test that present profile fields are listed and empty ones omitted."""
    details = {
        "login": "octocat",
        "name": "The Octocat",
        "bio": "",
        "location": "San Francisco",
        "company": None,
        "followers": 0,
        "public_repos": 8,
        "html_url": "https://github.com/octocat",
    }

    rendered = format_user_details({"login": "octocat"}, details)

    assert rendered.splitlines() == [
        "The Octocat (octocat)",
        "  Location: San Francisco",
        "  Followers: 0",
        "  Public repos: 8",
        "  Profile: https://github.com/octocat",
    ]


def test_format_user_details_without_name() -> None:
    """Test that the login is used as the heading when the profile has no name."""
    assert format_user_details({"login": "ghost"}, {"login": "ghost", "name": None}) == "ghost"


def test_format_user_details_unavailable() -> None:
    """Test the message shown when details could not be loaded."""
    assert format_user_details({"login": "ghost"}, None) == "Could not load details for ghost"
