"""Tests for the classify -> build -> send pipeline."""

from unittest.mock import AsyncMock, patch

import pytest

from bitbucket_relay.bitbucket import UnrecognizedEventError
from bitbucket_relay.config import Settings
from bitbucket_relay.pipeline import relay_event
from bitbucket_relay.slack import DeliveryResult


async def test_relay_event_sends_built_notification(pullrequest_payload: dict, settings: Settings):
    """A supported event is built and handed to the relay once."""
    with patch(
        "bitbucket_relay.pipeline.send_to_slack",
        new_callable=AsyncMock,
        return_value=DeliveryResult(ok=True, body="ok", status_code=200),
    ) as mock_send:
        result = await relay_event("pullrequest:approved", pullrequest_payload, settings)

    assert result.ok is True
    assert result.body == "ok"
    mock_send.assert_called_once()
    notification, passed_settings = mock_send.call_args.args
    assert "Approved" in notification.attachment.pretext
    assert passed_settings is settings


async def test_relay_event_unknown_sends_nothing(settings: Settings):
    """Unknown events raise before any transport call."""
    with patch("bitbucket_relay.pipeline.send_to_slack", new_callable=AsyncMock) as mock_send:
        with pytest.raises(UnrecognizedEventError):
            await relay_event("deployment:started", {}, settings)

    mock_send.assert_not_called()


async def test_relay_event_returns_transport_failure(push_payload: dict, settings: Settings):
    """Transport failures are returned as-is."""
    failure = DeliveryResult(ok=False, error="error:connection refused")
    with patch(
        "bitbucket_relay.pipeline.send_to_slack",
        new_callable=AsyncMock,
        return_value=failure,
    ):
        result = await relay_event("repo:push", push_payload, settings)

    assert result == failure
