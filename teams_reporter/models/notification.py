"""Models for the composed notification document."""

from collections.abc import Sequence
from typing import Literal

from pydantic import Field

from teams_reporter.models.base import Model

type NotificationStatus = Literal["passed", "flaky", "failed"]
type RowStyle = Literal["good", "warning", "attention", "accent"]


class TableRow(Model):
    """One label/value row of the summary table."""

    label: str
    value: str = ""
    style: RowStyle | None = None
    is_subtle: bool = False
    weight: Literal["Default", "Bolder"] | None = None


class Mention(Model):
    """A person to tag in the notification."""

    name: str
    email: str


class MentionDirective(Model):
    """Message text plus the people it tags."""

    message: str
    mentions: Sequence[Mention] = Field(..., min_length=1)


class ActionLink(Model):
    """A button opening a URL."""

    title: str
    url: str


class NotificationDocument(Model):
    """Provider-neutral content of one test run notification."""

    title: str
    status: NotificationStatus
    status_title: str
    color: str
    background_url: str
    rows: Sequence[TableRow]
    mention: MentionDirective | None = None
    actions: Sequence[ActionLink] = Field(default_factory=list)
    version: str = "1.6"
