"""End-to-end processing of a finished test run into a notification."""

import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from teams_reporter.aggregator import get_failed_tests, get_total_status
from teams_reporter.composer import compose_notification
from teams_reporter.config import ReporterConfig
from teams_reporter.dispatcher import WebhookDispatcher
from teams_reporter.models.result import ReportOutcome
from teams_reporter.models.tree import TestRun
from teams_reporter.validation import validate_webhook_url

log = logging.getLogger(__name__)

type DispatcherFactory = Callable[
    [ReporterConfig], AbstractAsyncContextManager[WebhookDispatcher]
]


async def process_results(
    test_run: TestRun | None,
    config: ReporterConfig,
    dispatcher_factory: DispatcherFactory = WebhookDispatcher.from_config,
) -> ReportOutcome:
    """Summarize ``test_run`` and post it to the configured webhook.

    Never raises for missing input or delivery problems: those are logged
    and reflected in the returned outcome.

    Args:
        test_run: Result tree of the finished run
        config: Reporter configuration
        dispatcher_factory: Context manager factory yielding the dispatcher

    Returns:
        The terminal state reached by this invocation

    """
    if config.webhook_url is None or not config.webhook_url.get_secret_value():
        log.error("No webhook URL provided")
        return ReportOutcome(status="skipped", reason="missing-webhook-url")

    webhook_url = config.webhook_url.get_secret_value()
    if not validate_webhook_url(webhook_url, config.webhook_type):
        log.error("Invalid webhook URL")
        return ReportOutcome(status="skipped", reason="invalid-webhook-url")

    if test_run is None:
        log.error("No test suite found")
        return ReportOutcome(status="skipped", reason="missing-test-run")

    if config.should_run is not None and not config.should_run(test_run):
        log.info("Notification disabled by should_run")
        return ReportOutcome(status="skipped", reason="should-run-rejected")

    tally = get_total_status(test_run.suites)
    failed_tests = get_failed_tests(test_run.suites)
    total_tests = sum(1 for _ in test_run.all_tests())

    if tally.unclassified:
        log.warning(
            "%d test(s) reported an unknown outcome and were not counted",
            tally.unclassified,
        )

    document = compose_notification(tally, failed_tests, total_tests, config)
    if document is None:
        return ReportOutcome(status="skipped", reason="success-suppressed")

    async with dispatcher_factory(config) as dispatcher:
        delivery = await dispatcher.send(document, webhook_url)

    return ReportOutcome(status=delivery.status, delivery=delivery)
