"""Deliver a notification to a Slack incoming webhook.

A single POST per notification, no retries. The outcome is reported as a
DeliveryResult rather than raised, so callers handle exactly one of
success-with-body or failure-with-message.
"""

import json
import logging

import httpx
from pydantic import BaseModel

from bitbucket_relay.config import Settings
from bitbucket_relay.models.notification import NotificationPayload

logger = logging.getLogger(__name__)


class DeliveryResult(BaseModel):
    """Outcome of one relay attempt."""

    ok: bool
    body: str | None = None  # Slack's response text
    status_code: int | None = None
    error: str | None = None  # "error:<message>" on transport failure


async def send_to_slack(
    notification: NotificationPayload, settings: Settings
) -> DeliveryResult:
    """POST the serialized notification to the configured Slack webhook.

    Any completed HTTP response counts as delivered and its body is returned,
    whatever the status code. Network-level errors become a failed result.
    """
    post_data = json.dumps(notification.to_slack(), ensure_ascii=False).encode("utf-8")
    headers = {
        "Content-Type": "text/plain",
        "Content-Length": str(len(post_data)),
    }

    logger.info("Sending normalized event to Slack host %s", settings.slack_webhook_host)
    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(settings.slack_timeout_seconds),
        ) as client:
            response = await client.post(
                settings.slack_webhook_url, content=post_data, headers=headers
            )
    except httpx.HTTPError as exc:
        logger.error("Slack delivery failed: %s", exc, exc_info=True)
        return DeliveryResult(ok=False, error=f"error:{exc}")

    if response.status_code >= 300:
        logger.warning(
            "Slack responded %d: %s", response.status_code, response.text
        )
    return DeliveryResult(ok=True, body=response.text, status_code=response.status_code)
