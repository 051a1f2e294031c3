"""Composition of a notification document from aggregated results."""

import logging
from collections.abc import Iterable

from teams_reporter.cards import BASE_CARD_VERSION, POWER_AUTOMATE_CARD_VERSION
from teams_reporter.config import ReporterConfig, UrlSource
from teams_reporter.mentions import get_mentions
from teams_reporter.models.notification import (
    ActionLink,
    NotificationDocument,
    TableRow,
)
from teams_reporter.models.result import OutcomeTally
from teams_reporter.styles import (
    get_notification_background,
    get_notification_color,
    get_notification_status,
    get_notification_title,
)

log = logging.getLogger(__name__)

MAX_LISTED_FAILURES = 20
FAILURE_OVERFLOW_TEXT = (
    f"Failed more than {MAX_LISTED_FAILURES} tests, "
    "see the pipeline for further details"
)

EMOJI = {
    "passed": "✅",
    "flaky": "⚠️",
    "failed": "❌",
    "skipped": "⏭️",
}


def _label(text: str, status: str, enable_emoji: bool) -> str:
    if enable_emoji:
        return f"{EMOJI[status]} {text}"
    return text


def build_table_rows(
    tally: OutcomeTally,
    failed_tests: Iterable[str],
    total_tests: int,
    enable_emoji: bool = False,
) -> list[TableRow]:
    """Build the summary table rows in display order."""
    rows = [
        TableRow(label="Type", value="Total"),
        TableRow(
            label=_label("Passed", "passed", enable_emoji),
            value=str(tally.passed),
            style="good",
        ),
    ]
    if tally.flaky:
        rows.append(
            TableRow(
                label=_label("Flaky", "flaky", enable_emoji),
                value=str(tally.flaky),
                style="warning",
            )
        )
    rows.append(
        TableRow(
            label=_label("Failed", "failed", enable_emoji),
            value=str(tally.failed),
            style="attention",
        )
    )

    failures = list(failed_tests)
    if len(failures) > MAX_LISTED_FAILURES:
        rows.append(TableRow(label=FAILURE_OVERFLOW_TEXT, style="attention"))
    else:
        rows.extend(
            TableRow(label=failure, style="attention") for failure in failures
        )

    rows.append(
        TableRow(
            label=_label("Skipped", "skipped", enable_emoji),
            value=str(tally.skipped),
            style="accent",
        )
    )
    rows.append(
        TableRow(
            label="Total tests",
            value=str(total_tests),
            is_subtle=True,
            weight="Bolder",
        )
    )
    return rows


def _resolve_url(source: UrlSource | None) -> str | None:
    if source is None:
        return None
    return source.resolve()


def build_actions(config: ReporterConfig, is_success: bool) -> list[ActionLink]:
    """Build the optional "view results" and "failure details" links."""
    actions: list[ActionLink] = []

    if results_url := _resolve_url(config.link_to_results_url):
        actions.append(ActionLink(title=config.link_to_results_text, url=results_url))

    if not is_success and config.link_text_on_failure and config.link_url_on_failure:
        if failure_url := _resolve_url(config.link_url_on_failure):
            actions.append(
                ActionLink(title=config.link_text_on_failure, url=failure_url)
            )

    return actions


def compose_notification(
    tally: OutcomeTally,
    failed_tests: Iterable[str],
    total_tests: int,
    config: ReporterConfig,
) -> NotificationDocument | None:
    """Compose the notification for a finished run.

    Returns None when every test passed and ``notify_on_success`` is off.
    """
    if tally.is_success and not config.notify_on_success:
        if not config.quiet:
            log.info("No failed tests, skipping notification")
        return None

    mention = None
    if not tally.is_success:
        directive = get_mentions(
            config.mention_on_failure, config.mention_on_failure_text
        )
        if directive is not None and directive.message and directive.mentions:
            mention = directive

    if config.webhook_type == "powerautomate":
        version = POWER_AUTOMATE_CARD_VERSION
    else:
        version = BASE_CARD_VERSION

    return NotificationDocument(
        title=config.title,
        status=get_notification_status(tally),
        status_title=get_notification_title(tally),
        color=get_notification_color(tally),
        background_url=get_notification_background(tally),
        rows=build_table_rows(tally, failed_tests, total_tests, config.enable_emoji),
        mention=mention,
        actions=build_actions(config, tally.is_success),
        version=version,
    )
