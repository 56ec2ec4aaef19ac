"""End-to-end relay: classify the event, build the message, send it to Slack."""

import logging
from collections.abc import Mapping
from typing import Any

from bitbucket_relay.bitbucket import build_notification
from bitbucket_relay.config import Settings
from bitbucket_relay.slack import DeliveryResult, send_to_slack

logger = logging.getLogger(__name__)


async def relay_event(
    event_key: str | None,
    payload: Mapping[str, Any] | None,
    settings: Settings,
) -> DeliveryResult:
    """Normalize one Bitbucket webhook and deliver it.

    Raises UnrecognizedEventError for unsupported event keys; nothing is sent
    in that case. Transport failures are returned as a failed DeliveryResult.
    """
    logger.info("Event received. Processing %s", event_key)
    notification = build_notification(event_key, payload, settings)
    result = await send_to_slack(notification, settings)
    if result.ok:
        logger.info("Relayed %s to Slack (status %s)", event_key, result.status_code)
    return result
