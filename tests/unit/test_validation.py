"""Tests for webhook URL validation."""

import pytest

from teams_reporter.validation import validate_webhook_url

TEAMS_URL = (
    "https://contoso.webhook.office.com/webhookb2/abc@def/IncomingWebhook/123/456"
)
POWER_AUTOMATE_URL = (
    "https://prod-12.westeurope.logic.azure.com:443/workflows/abc/triggers/manual"
    "/paths/invoke?api-version=2016-06-01&sig=xyz"
)
POWER_PLATFORM_URL = (
    "https://default1234.56.environment.api.powerplatform.com:443/powerautomate"
    "/automations/direct/workflows/abc/triggers/manual/paths/invoke"
)


@pytest.mark.parametrize(
    ("url", "webhook_type", "expected"),
    [
        (TEAMS_URL, "msteams", True),
        (POWER_AUTOMATE_URL, "powerautomate", True),
        (POWER_PLATFORM_URL, "powerautomate", True),
        (TEAMS_URL, "powerautomate", False),
        (POWER_AUTOMATE_URL, "msteams", False),
        (TEAMS_URL.replace("https://", "http://"), "msteams", False),
        ("https://contoso.webhook.office.com/", "msteams", False),
        ("https://evil.example.com/webhookb2/abc", "msteams", False),
        ("not a url", "msteams", False),
        ("", "powerautomate", False),
    ],
)
def test_validate_webhook_url(url: str, webhook_type: str, expected: bool) -> None:
    """Accepts only HTTPS URLs on the flavor's hosts."""
    assert validate_webhook_url(url, webhook_type) is expected  # type: ignore[arg-type]
