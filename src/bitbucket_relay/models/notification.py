"""Slack message model using legacy attachments."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Color(str, Enum):
    """Attachment side-bar colors."""

    RED = "#e74c3c"
    GREEN = "#2ecc71"
    BLUE = "#3498db"
    YELLOW = "#f1c40f"


class AttachmentField(BaseModel):
    """A label/value pair rendered in the attachment body."""

    title: str
    value: str = ""
    short: bool | None = None  # True renders two fields side by side


class Attachment(BaseModel):
    """One notification block: header, color bar and fields."""

    title: str | None = None
    title_link: str | None = None
    color: Color = Color.BLUE
    pretext: str | None = None  # shown above the block
    fallback: str | None = None  # plain-text summary for notifications
    fields: list[AttachmentField] = Field(default_factory=list)
    mrkdwn_in: list[str] = Field(default_factory=lambda: ["pretext", "fields"])

    def add_field(self, title: str, value: str, short: bool | None = None) -> None:
        """Append a field, keeping insertion order."""
        self.fields.append(AttachmentField(title=title, value=value, short=short))

    def field(self, title: str) -> AttachmentField | None:
        """Return the first field with the given title, or None."""
        return next((f for f in self.fields if f.title == title), None)


class NotificationPayload(BaseModel):
    """Body POSTed to a Slack incoming webhook."""

    link_names: int = 1
    mrkdwn: bool = True
    attachments: list[Attachment] = Field(default_factory=list)

    @property
    def attachment(self) -> Attachment:
        """The primary (first) attachment. Builders always create exactly one."""
        return self.attachments[0]

    def to_slack(self) -> dict[str, Any]:
        """Serialize to the JSON-ready dict Slack expects, dropping unset keys."""
        return self.model_dump(mode="json", exclude_none=True)
