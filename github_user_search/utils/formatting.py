"""Plain text rendering of user cards and the user detail view."""

from typing import Any, Iterable

from .constants import NO_USERS_MESSAGE

DETAIL_FIELDS: list[tuple[str, str]] = [
    ("bio", "Bio"),
    ("location", "Location"),
    ("company", "Company"),
    ("blog", "Blog"),
    ("created_at", "Joined"),
    ("followers", "Followers"),
    ("following", "Following"),
    ("public_repos", "Public repos"),
    ("public_gists", "Public gists"),
    ("html_url", "Profile"),
]
"""Profile fields shown in the detail view, in display order."""


def format_score(score: Any) -> str:
    """Round a search score to two decimals, dropping trailing zeros."""
    return f"{round(float(score or 0), 2):g}"


def format_user_card(user: dict[str, Any]) -> str:
    """Render one search result as a short text card."""
    return f"{user.get('login', '')}  (ID: {user.get('id', '')})\n  {user.get('type', '')}  Score: {format_score(user.get('score'))}"


def format_user_list(users: Iterable[dict[str, Any]]) -> str:
    """Render a list of search results, or the empty-result hint."""
    cards = [format_user_card(user) for user in users]
    if not cards:
        return NO_USERS_MESSAGE
    return "\n".join(cards)


def format_user_details(user: dict[str, Any], details: dict[str, Any] | None) -> str:
    """Render the detail view for a user.

    Fields that are missing or empty in the profile are left out.
    """
    login = user.get("login", "")
    if details is None:
        return f"Could not load details for {login}"
    name = details.get("name")
    lines = [f"{name} ({login})" if name else login]
    for key, label in DETAIL_FIELDS:
        value = details.get(key)
        if value is None or value == "":
            continue
        lines.append(f"  {label}: {value}")
    return "\n".join(lines)
