"""Tests for Playwright report loading."""

import json
from pathlib import Path

import pytest

from teams_reporter.aggregator import get_failed_tests, get_total_status
from teams_reporter.models.result import OutcomeTally
from teams_reporter.report_loader import ReportLoadError, load_report, parse_report
from teams_reporter.testing.payloads import (
    report,
    report_spec,
    report_suite,
    report_test,
)


def test_parse_nested_report() -> None:
    """Specs become tests of their enclosing suite, one per project."""
    content = json.dumps(
        report(
            suites=[
                report_suite(
                    "login.spec.ts",
                    specs=[report_spec("shows form")],
                    suites=[
                        report_suite(
                            "with bad password",
                            specs=[
                                report_spec(
                                    "shows error",
                                    tests=[
                                        report_test("unexpected", "chromium"),
                                        report_test("flaky", "firefox"),
                                    ],
                                )
                            ],
                        )
                    ],
                )
            ]
        )
    )

    test_run = parse_report(content)

    (file_suite,) = test_run.suites
    assert file_suite.title == "login.spec.ts"
    assert [test.title for test in file_suite.tests] == ["shows form"]
    inner = file_suite.suites[0]
    assert [(t.title, t.outcome) for t in inner.tests] == [
        ("shows error", "unexpected"),
        ("shows error", "flaky"),
    ]
    assert get_total_status(test_run.suites) == OutcomeTally(
        passed=1, flaky=1, failed=1
    )
    assert list(get_failed_tests(test_run.suites)) == [
        "with bad password - shows error"
    ]


def test_parse_empty_report() -> None:
    """A report without suites yields an empty run."""
    test_run = parse_report(json.dumps(report()))

    assert list(test_run.all_tests()) == []


@pytest.mark.parametrize("content", ["not json", '{"suites": "nope"}'])
def test_parse_invalid_report(content: str) -> None:
    """Malformed reports raise ReportLoadError."""
    with pytest.raises(ReportLoadError, match="Invalid Playwright JSON report"):
        parse_report(content)


async def test_load_report(tmp_path: Path) -> None:
    """Reads and parses the report file."""
    path = tmp_path / "results.json"
    path.write_text(
        json.dumps(report(suites=[report_suite("a.spec.ts", [report_spec("t")])]))
    )

    test_run = await load_report(path)

    assert [test.title for test in test_run.all_tests()] == ["t"]


async def test_load_missing_report(tmp_path: Path) -> None:
    """A missing file raises ReportLoadError."""
    with pytest.raises(ReportLoadError, match="Cannot read report"):
        await load_report(tmp_path / "missing.json")


async def test_load_report_with_invalid_utf8(tmp_path: Path) -> None:
    """Bytes that are not UTF-8 raise ReportLoadError."""
    path = tmp_path / "results.json"
    path.write_bytes(b'{"suites": [{"title": "\xff"}]}')

    with pytest.raises(ReportLoadError, match="Cannot read report"):
        await load_report(path)
