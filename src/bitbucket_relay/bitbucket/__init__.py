"""Bitbucket webhook handling: event classification, field extraction, message building.

Public API:
    build_notification(event_key, payload, settings) -> NotificationPayload
        Validates the ``X-Event-Key`` against the dispatch table and runs the
        matching message builder.
"""

from bitbucket_relay.bitbucket.events import (
    HANDLERS,
    SUPPORTED_EVENTS,
    UnrecognizedEventError,
    build_notification,
    parse_event_key,
)
from bitbucket_relay.bitbucket.lookup import get_key

__all__ = [
    "HANDLERS",
    "SUPPORTED_EVENTS",
    "UnrecognizedEventError",
    "build_notification",
    "get_key",
    "parse_event_key",
]
