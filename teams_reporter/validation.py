"""Webhook URL format checks per webhook flavor."""

import re
from collections.abc import Mapping

from yarl import URL

from teams_reporter.config import WebhookType

HOST_PATTERNS: Mapping[WebhookType, re.Pattern[str]] = {
    "msteams": re.compile(r"^[\w-]+\.webhook\.office\.com$"),
    "powerautomate": re.compile(
        r"^(prod-\d+\.[\w-]+\.logic\.azure\.com"
        r"|[\w.-]+\.environment\.api\.powerplatform\.com)$"
    ),
}


def validate_webhook_url(url: str, webhook_type: WebhookType) -> bool:
    """Check that ``url`` looks like an HTTPS webhook of the given flavor."""
    try:
        parsed = URL(url)
    except ValueError:
        return False

    if parsed.scheme != "https" or not parsed.host:
        return False

    return bool(HOST_PATTERNS[webhook_type].match(parsed.host)) and parsed.path != "/"
