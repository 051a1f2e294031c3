"""Adaptive Card rendering of a notification document."""

from collections.abc import Mapping
from typing import Any

from teams_reporter.models.notification import NotificationDocument, TableRow

ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
BASE_CARD_VERSION = "1.6"
POWER_AUTOMATE_CARD_VERSION = "1.4"

TABLE_COLUMNS = ({"width": 2}, {"width": 1})


def render_row(row: TableRow) -> dict[str, Any]:
    """Render a two-cell ``TableRow``."""
    text_props: dict[str, Any] = {"wrap": True}
    if row.is_subtle:
        text_props["isSubtle"] = True
    if row.weight:
        text_props["weight"] = row.weight

    rendered: dict[str, Any] = {
        "type": "TableRow",
        "cells": [
            {
                "type": "TableCell",
                "items": [{"type": "TextBlock", "text": text, **text_props}],
            }
            for text in (row.label, row.value)
        ],
    }
    if row.style:
        rendered["style"] = row.style
    return rendered


def render_card(document: NotificationDocument) -> dict[str, Any]:
    """Build a fresh Adaptive Card dict from ``document``."""
    items: list[dict[str, Any]] = [
        {
            "type": "TextBlock",
            "size": "ExtraLarge",
            "weight": "Bolder",
            "text": document.title,
        },
        {
            "type": "TextBlock",
            "size": "Large",
            "weight": "Bolder",
            "text": document.status_title,
            "color": document.color,
        },
        {
            "type": "Table",
            "columns": [dict(column) for column in TABLE_COLUMNS],
            "rows": [render_row(row) for row in document.rows],
        },
    ]

    msteams: dict[str, Any] = {"width": "Full"}
    if document.mention is not None:
        items.append(
            {
                "type": "TextBlock",
                "size": "Medium",
                "text": document.mention.message,
                "wrap": True,
            }
        )
        msteams["entities"] = [
            {
                "type": "mention",
                "text": f"<at>{mention.email}</at>",
                "mentioned": {"id": mention.email, "name": mention.name},
            }
            for mention in document.mention.mentions
        ]

    return {
        "type": "AdaptiveCard",
        "$schema": ADAPTIVE_CARD_SCHEMA,
        "version": document.version,
        "msteams": msteams,
        "body": [
            {
                "type": "Container",
                "items": items,
                "bleed": True,
                "backgroundImage": {
                    "url": document.background_url,
                    "fillMode": "RepeatHorizontally",
                },
            }
        ],
        "actions": [
            {"type": "Action.OpenUrl", "title": action.title, "url": action.url}
            for action in document.actions
        ],
    }


def build_envelope(card: Mapping[str, Any]) -> dict[str, Any]:
    """Wrap a card in the message envelope expected by the webhook."""
    return {
        "type": "message",
        "attachments": [
            {
                "contentType": ADAPTIVE_CARD_CONTENT_TYPE,
                "contentUrl": None,
                "content": card,
            }
        ],
    }
