"""Dotted-path lookups into loosely shaped webhook payloads."""

from collections.abc import Mapping
from typing import Any


def get_key(payload: Any, path: str) -> Any:
    """Return the value at a dotted key path, or None if it cannot be reached.

    The walk stops at the first segment that is missing, None, or not a
    mapping. Present-but-falsy values ("", 0, False, []) are returned as-is.

    Example
    -------
    get_key(event, "pullrequest.author.display_name")
    """
    current = payload
    for key in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def get_str(payload: Any, path: str) -> str | None:
    """Like :func:`get_key`, but only scalar values are returned, as text."""
    value = get_key(payload, path)
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return None
    return value if isinstance(value, str) else str(value)


def get_list(payload: Any, path: str) -> list[Any] | None:
    """Like :func:`get_key`, but only list values are returned."""
    value = get_key(payload, path)
    return value if isinstance(value, list) else None
