"""Tests for dotted-path payload lookups."""

from bitbucket_relay.bitbucket.lookup import get_key, get_list, get_str

PAYLOAD = {
    "pullrequest": {
        "title": "Fix bug",
        "author": {"display_name": "Alice", "username": "alice"},
        "comment_count": 0,
        "draft": False,
        "description": "",
        "reviewers": [{"username": "bob"}],
    },
    "actor": None,
}


def test_get_key_nested_value():
    """A fully resolvable path returns the leaf value."""
    assert get_key(PAYLOAD, "pullrequest.author.display_name") == "Alice"


def test_get_key_top_level():
    """A single-segment path returns the top-level value."""
    assert get_key(PAYLOAD, "pullrequest")["title"] == "Fix bug"


def test_get_key_missing_leaf():
    """A missing final key returns None."""
    assert get_key(PAYLOAD, "pullrequest.author.email") is None


def test_get_key_missing_intermediate():
    """A missing intermediate key returns None instead of raising."""
    assert get_key(PAYLOAD, "comment.content.raw") is None


def test_get_key_null_intermediate():
    """An explicit null along the path returns None."""
    assert get_key(PAYLOAD, "actor.display_name") is None


def test_get_key_path_past_scalar():
    """Walking past a non-mapping value returns None."""
    assert get_key(PAYLOAD, "pullrequest.title.length") is None


def test_get_key_path_past_list():
    """Lists are not indexed by dotted segments."""
    assert get_key(PAYLOAD, "pullrequest.reviewers.0") is None


def test_get_key_keeps_falsy_values():
    """Present-but-falsy values are returned, not coerced to None."""
    assert get_key(PAYLOAD, "pullrequest.comment_count") == 0
    assert get_key(PAYLOAD, "pullrequest.draft") is False
    assert get_key(PAYLOAD, "pullrequest.description") == ""


def test_get_key_non_mapping_payload():
    """Non-mapping payloads resolve every path to None."""
    assert get_key(None, "a.b") is None
    assert get_key("text", "a") is None
    assert get_key([1, 2], "a") is None


def test_get_key_empty_payload():
    """An empty payload never raises."""
    assert get_key({}, "pullrequest.author.username") is None


def test_get_key_is_repeatable():
    """Repeated lookups return the same value and leave the payload untouched."""
    before = repr(PAYLOAD)
    first = get_key(PAYLOAD, "pullrequest.author.username")
    second = get_key(PAYLOAD, "pullrequest.author.username")
    assert first == second == "alice"
    assert repr(PAYLOAD) == before


def test_get_str_converts_scalars():
    """Scalars are rendered as text."""
    assert get_str(PAYLOAD, "pullrequest.comment_count") == "0"
    assert get_str(PAYLOAD, "pullrequest.title") == "Fix bug"


def test_get_str_rejects_containers():
    """Mappings and lists are not text."""
    assert get_str(PAYLOAD, "pullrequest.author") is None
    assert get_str(PAYLOAD, "pullrequest.reviewers") is None


def test_get_list_returns_lists_only():
    """get_list only returns list values."""
    assert get_list(PAYLOAD, "pullrequest.reviewers") == [{"username": "bob"}]
    assert get_list(PAYLOAD, "pullrequest.title") is None
    assert get_list(PAYLOAD, "push.changes") is None
