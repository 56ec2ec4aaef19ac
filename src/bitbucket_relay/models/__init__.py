"""Data models for the Bitbucket relay pipeline."""

from bitbucket_relay.models.context import PullRequestContext, RepoContext
from bitbucket_relay.models.event import EventKey, InboundEvent
from bitbucket_relay.models.notification import (
    Attachment,
    AttachmentField,
    Color,
    NotificationPayload,
)

__all__ = [
    "EventKey",
    "InboundEvent",
    "PullRequestContext",
    "RepoContext",
    "Attachment",
    "AttachmentField",
    "Color",
    "NotificationPayload",
]
