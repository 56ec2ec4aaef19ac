"""AWS Lambda entry point behind API Gateway.

Configure the API Gateway method to expose the ``X-Event-Key`` header and use
this body mapping template (application/json) on the integration request::

    {
      "payload" : $input.json('$'),
      "_event_key" : "$input.params('X-Event-Key')"
    }

Then register the gateway URL as a Bitbucket webhook.
"""

import asyncio
import logging
from typing import Any

from bitbucket_relay.config import get_settings
from bitbucket_relay.logging_config import configure_logging
from bitbucket_relay.models.event import InboundEvent
from bitbucket_relay.pipeline import relay_event

logger = logging.getLogger(__name__)

# Set on the first invocation of a container (cold start)
_logging_configured = False


class DeliveryFailedError(RuntimeError):
    """Raised when the notification could not be delivered to Slack."""


def handler(event: dict[str, Any], context: Any = None) -> str:
    """Relay one mapped Bitbucket webhook and return Slack's response body.

    Raising marks the invocation as failed: UnrecognizedEventError for
    unsupported event keys, DeliveryFailedError for transport errors.
    """
    global _logging_configured
    settings = get_settings()
    if not _logging_configured:
        configure_logging(settings.log_level)
        _logging_configured = True

    inbound = InboundEvent.model_validate(event)
    result = asyncio.run(relay_event(inbound.event_key, inbound.payload, settings))
    if not result.ok:
        logger.error("Invocation failed: %s", result.error)
        raise DeliveryFailedError(result.error)
    return result.body or ""
