"""Bitbucket webhook routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Header, HTTPException
from fastapi.responses import PlainTextResponse

from bitbucket_relay.bitbucket import UnrecognizedEventError, build_notification
from bitbucket_relay.config import Settings, get_settings
from bitbucket_relay.models.event import InboundEvent
from bitbucket_relay.pipeline import relay_event

router = APIRouter(prefix="", tags=["bitbucket"])


async def _relay(
    event_key: str | None, payload: dict[str, Any] | None, settings: Settings
) -> PlainTextResponse:
    try:
        result = await relay_event(event_key, payload, settings)
    except UnrecognizedEventError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if not result.ok:
        return PlainTextResponse(result.error or "error:", status_code=502)
    return PlainTextResponse(result.body or "")


@router.post("/bitbucket/events", response_class=PlainTextResponse)
async def bitbucket_events(
    payload: dict[str, Any] = Body(...),
    x_event_key: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> PlainTextResponse:
    """Receive a Bitbucket webhook directly.

    The event type comes from the ``X-Event-Key`` header. Responds with
    Slack's response body, 400 for unsupported events, 502 when Slack is
    unreachable.
    """
    return await _relay(x_event_key, payload, settings)


@router.post("/invoke", response_class=PlainTextResponse)
async def invoke(
    event: InboundEvent,
    settings: Settings = Depends(get_settings),
) -> PlainTextResponse:
    """Receive a webhook already wrapped as ``{"payload": ..., "_event_key": ...}``."""
    return await _relay(event.event_key, event.payload, settings)


@router.post("/preview")
async def preview(
    payload: dict[str, Any] = Body(...),
    x_event_key: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Build the Slack message for a webhook without sending it."""
    try:
        notification = build_notification(x_event_key, payload, settings)
    except UnrecognizedEventError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return notification.to_slack()
