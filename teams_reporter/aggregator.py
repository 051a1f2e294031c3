"""Aggregation of per-test outcomes into summary counts and failure records."""

import logging
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Literal

from teams_reporter.models.result import OutcomeTally
from teams_reporter.models.tree import Suite

log = logging.getLogger(__name__)

type Bucket = Literal["passed", "flaky", "failed", "skipped"]

OUTCOME_TO_BUCKET: Mapping[str, Bucket] = {
    "expected": "passed",
    "flaky": "flaky",
    "unexpected": "failed",
    "skipped": "skipped",
}


def get_total_status(suites: Iterable[Suite]) -> OutcomeTally:
    """Tally the outcome of every leaf test below the given suites.

    Outcomes missing from ``OUTCOME_TO_BUCKET`` only increment
    ``unclassified``.
    """
    counts: Counter[str] = Counter()

    for suite in suites:
        for test in suite.all_tests():
            bucket = OUTCOME_TO_BUCKET.get(test.outcome)
            if bucket is None:
                log.debug(
                    "Unclassified outcome %r for test %r", test.outcome, test.title
                )
                counts["unclassified"] += 1
            else:
                counts[bucket] += 1

    return OutcomeTally(
        passed=counts["passed"],
        flaky=counts["flaky"],
        failed=counts["failed"],
        skipped=counts["skipped"],
        unclassified=counts["unclassified"],
    )


@dataclass(frozen=True)
class FailedTests:
    """Display strings of the tests that failed outright.

    Each iteration walks the suites again, so the result can be consumed
    more than once.
    """

    suites: Iterable[Suite]

    def __iter__(self) -> Iterator[str]:
        for suite in self.suites:
            for parent, test in suite.walk():
                if test.outcome == "unexpected":
                    yield f"{parent.title} - {test.title}"


def get_failed_tests(suites: Iterable[Suite]) -> FailedTests:
    """Return the restartable sequence of failed test identifiers."""
    return FailedTests(tuple(suites))
