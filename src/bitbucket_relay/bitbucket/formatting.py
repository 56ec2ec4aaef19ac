"""Text helpers for Slack mrkdwn rendering."""

from collections.abc import Iterable, Mapping
from typing import Any

from bitbucket_relay.bitbucket.lookup import get_str

ELLIPSIS = " [...]"
DEFAULT_MAX_LENGTH = 100
UNKNOWN = "unknown"

# Continuation lines of a merge commit render as an italic block under the summary
_COMMIT_BODY_INDENT = "\n" + " " * 21 + "_"


def text(value: Any) -> str:
    """Render an optional value as text; None becomes an empty string."""
    return "" if value is None else str(value)


def capitalize(value: str | None) -> str:
    """Upper-case the first character only: ``named_branch`` -> ``Named_branch``."""
    value = value or ""
    return value[:1].upper() + value[1:]


def truncate(
    value: str | None,
    max_length: int = DEFAULT_MAX_LENGTH,
    show_ellipsis: bool = True,
) -> str:
    """Cut text to ``max_length`` characters, appending " [...]" when cut.

    Text that already fits is returned unchanged.
    """
    value = value or ""
    if len(value) > max_length:
        return value[:max_length] + (ELLIPSIS if show_ellipsis else "")
    return value


def format_commit_message(message: str | None) -> str:
    """Trim a commit message and quote its body under the summary line.

    Bitbucket merge commits carry a summary, a blank line, then details. The
    first blank line is replaced with an indented italic marker and the
    message is closed with ``_`` so Slack renders the details in italics.
    """
    message = (message or "").strip()
    if "\n\n" in message:
        message = message.replace("\n\n", _COMMIT_BODY_INDENT, 1) + "_"
    return message


def mention(username: str | None, user_map: Mapping[str, str]) -> str:
    """Render an @mention for a Bitbucket username.

    Mapped usernames use their Slack handle. Unmapped usernames fall back to
    the Bitbucket username itself, and a missing username renders ``@unknown``.
    """
    if not username:
        return f"@{UNKNOWN}"
    return "@" + user_map.get(username, username)


def mentions(users: Iterable[Any], user_map: Mapping[str, str]) -> str:
    """Space-separated @mentions for a list of Bitbucket user objects."""
    return " ".join(mention(get_str(user, "username"), user_map) for user in users)
