"""Inbound event models: the parsed event key and the mapped request body."""

from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class EventKey(NamedTuple):
    """A Bitbucket ``X-Event-Key`` split into its two parts.

    ``pullrequest:comment_created`` -> ``EventKey("pullrequest", "comment_created")``
    """

    context: str
    action: str

    def __str__(self) -> str:
        return f"{self.context}:{self.action}"


class InboundEvent(BaseModel):
    """Request body produced by the API Gateway body mapping template.

    The gateway copies the ``X-Event-Key`` header into ``_event_key`` next to
    the untouched Bitbucket webhook body::

        {"payload": $input.json('$'), "_event_key": "$input.params('X-Event-Key')"}
    """

    model_config = ConfigDict(populate_by_name=True)

    payload: dict[str, Any] | None = None
    event_key: str | None = Field(default=None, alias="_event_key")
