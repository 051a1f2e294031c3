"""Status title, color and background lookups."""

from collections.abc import Mapping

from teams_reporter.models.notification import NotificationStatus
from teams_reporter.models.result import OutcomeTally

ASSETS_URL = (
    "https://raw.githubusercontent.com/estruyf/playwright-msteams-reporter/main/assets"
)

STATUS_TITLES: Mapping[NotificationStatus, str] = {
    "passed": "Tests passed",
    "flaky": "Tests passed with flaky tests",
    "failed": "Tests failed",
}

STATUS_COLORS: Mapping[NotificationStatus, str] = {
    "passed": "Good",
    "flaky": "Warning",
    "failed": "Attention",
}


def get_notification_status(tally: OutcomeTally) -> NotificationStatus:
    """Classify a run as failed, flaky or passed, in that order of precedence."""
    if tally.failed > 0:
        return "failed"
    if tally.flaky > 0:
        return "flaky"
    return "passed"


def get_notification_title(tally: OutcomeTally) -> str:
    return STATUS_TITLES[get_notification_status(tally)]


def get_notification_color(tally: OutcomeTally) -> str:
    return STATUS_COLORS[get_notification_status(tally)]


def get_notification_background(tally: OutcomeTally) -> str:
    return f"{ASSETS_URL}/status-{get_notification_status(tally)}.png"
