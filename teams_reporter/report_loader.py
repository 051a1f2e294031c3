"""Loading of test run trees from Playwright JSON reports."""

import asyncio
from pathlib import Path

from pydantic import ValidationError

from teams_reporter.models.playwright import Report, ReportSuite
from teams_reporter.models.tree import Suite, TestCase, TestRun


class ReportLoadError(Exception):
    """Raised when a report file cannot be read or parsed."""


def convert_suite(report_suite: ReportSuite) -> Suite:
    """Convert a report suite, turning every spec/project pair into a test."""
    tests = [
        TestCase(title=spec.title, outcome=test.status)
        for spec in report_suite.specs
        for test in spec.tests
    ]
    return Suite(
        title=report_suite.title,
        suites=[convert_suite(child) for child in report_suite.suites],
        tests=tests,
    )


def parse_report(content: str) -> TestRun:
    """Parse the JSON text of a Playwright report into a ``TestRun``."""
    try:
        report = Report.model_validate_json(content)
    except ValidationError as exc:
        raise ReportLoadError(f"Invalid Playwright JSON report: {exc}") from exc

    return TestRun(
        suites=[convert_suite(suite) for suite in report.suites],
    )


async def load_report(path: Path) -> TestRun:
    """Read and parse a Playwright JSON report file.

    Raises:
        ReportLoadError: If the file is missing or is not a valid report

    """
    try:
        content = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReportLoadError(f"Cannot read report {path}: {exc}") from exc

    return parse_report(content)
