"""CLI entry point for posting test run summaries to Microsoft Teams."""

import argparse
import asyncio
import json
import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from teams_reporter.config import ReporterConfig
from teams_reporter.models.result import ReportOutcome
from teams_reporter.reporter import process_results
from teams_reporter.report_loader import ReportLoadError, load_report

WEBHOOK_URL_ENV = "TEAMS_WEBHOOK_URL"


def build_config(
    config_json: str, webhook_url: str | None, debug: bool = False
) -> ReporterConfig:
    """Build reporter configuration from CLI inputs.

    ``webhook_url`` and ``debug`` override the matching JSON keys when set.
    """
    config_dict: dict[str, Any] = json.loads(config_json) if config_json else {}
    if webhook_url:
        config_dict["webhook_url"] = webhook_url
    if debug:
        config_dict["debug"] = True
    return ReporterConfig.model_validate(config_dict)


def format_output(outcome: ReportOutcome) -> dict[str, Any]:
    """Format the pipeline outcome for JSON output."""
    return asdict(outcome)


async def run(
    report_path: Path,
    config_json: str,
    webhook_url: str | None,
    debug: bool = False,
) -> int:
    """Load the report, send the notification and return exit code."""
    log = logging.getLogger("teams_reporter")

    try:
        config = build_config(config_json, webhook_url, debug)
    except (json.JSONDecodeError, ValidationError) as exc:
        log.error("Invalid reporter configuration: %s", exc)
        return 2

    log.info("Loading report: %s", report_path)
    try:
        test_run = await load_report(report_path)
    except ReportLoadError as exc:
        log.error("%s", exc)
        return 2

    outcome = await process_results(test_run, config)
    log.info("Notification outcome: %s", outcome.status)

    print(json.dumps(format_output(outcome), indent=2))
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Post a Playwright test run summary to a Teams webhook"
    )
    parser.add_argument(
        "--report",
        type=Path,
        required=True,
        help="Path to the Playwright JSON report",
    )
    parser.add_argument(
        "--config",
        default="",
        help="JSON configuration for the reporter",
    )
    parser.add_argument(
        "--webhook-url",
        default=os.environ.get(WEBHOOK_URL_ENV),
        help=f"Webhook URL (defaults to ${WEBHOOK_URL_ENV})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log the outgoing payload",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            report_path=args.report,
            config_json=args.config,
            webhook_url=args.webhook_url,
            debug=args.debug,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
