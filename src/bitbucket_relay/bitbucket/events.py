"""Event key classification and dispatch to message builders.

The dispatch table is the whitelist: an ``X-Event-Key`` is supported exactly
when its ``(context, action)`` pair is a key of HANDLERS.
"""

import logging
from collections.abc import Mapping
from typing import Any

from bitbucket_relay.bitbucket import builders
from bitbucket_relay.bitbucket.builders import Handler
from bitbucket_relay.config import Settings
from bitbucket_relay.models.event import EventKey
from bitbucket_relay.models.notification import NotificationPayload

logger = logging.getLogger(__name__)


class UnrecognizedEventError(ValueError):
    """Raised for event keys that are malformed or not in the dispatch table."""

    def __init__(self, event_key: str | None) -> None:
        self.event_key = event_key
        super().__init__(f"An unknown event type was submitted: {event_key}")


HANDLERS: dict[EventKey, Handler] = {
    EventKey("pullrequest", "created"): builders.pullrequest_created,
    EventKey("pullrequest", "updated"): builders.pullrequest_updated,
    EventKey("pullrequest", "rejected"): builders.pullrequest_rejected,
    EventKey("pullrequest", "fulfilled"): builders.pullrequest_fulfilled,
    EventKey("pullrequest", "approved"): builders.pullrequest_approved,
    EventKey("pullrequest", "unapproved"): builders.pullrequest_unapproved,
    EventKey("pullrequest", "comment_created"): builders.pullrequest_comment_created,
    EventKey("pullrequest", "comment_updated"): builders.pullrequest_comment_updated,
    EventKey("pullrequest", "comment_deleted"): builders.pullrequest_comment_deleted,
    EventKey("repo", "push"): builders.repo_push,
}

SUPPORTED_EVENTS: frozenset[str] = frozenset(str(key) for key in HANDLERS)


def parse_event_key(raw: str | None) -> EventKey:
    """Split an ``X-Event-Key`` value on its first colon.

    A value without a colon yields an empty action. No validation happens here.
    """
    context, _, action = (raw or "").partition(":")
    return EventKey(context, action)


def resolve_handler(raw: str | None) -> Handler:
    """Return the builder for an event key or raise UnrecognizedEventError."""
    key = parse_event_key(raw)
    handler = HANDLERS.get(key) if key.action else None
    if handler is None:
        raise UnrecognizedEventError(raw)
    return handler


def build_notification(
    event_key: str | None,
    payload: Mapping[str, Any] | None,
    settings: Settings,
) -> NotificationPayload:
    """Classify the event and build its Slack notification.

    Raises UnrecognizedEventError before any payload field is read when the
    event key is not supported.
    """
    logger.info("Generating message for event key: %s", event_key)
    try:
        handler = resolve_handler(event_key)
    except UnrecognizedEventError:
        logger.warning("Rejected unknown event key: %s", event_key)
        raise
    return handler(payload or {}, settings)
