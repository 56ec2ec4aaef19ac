"""Slack egress: deliver built notifications to an incoming webhook."""

from bitbucket_relay.slack.relay import DeliveryResult, send_to_slack

__all__ = [
    "DeliveryResult",
    "send_to_slack",
]
