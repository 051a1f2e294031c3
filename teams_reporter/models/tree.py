"""Models for the suite/test hierarchy produced by a finished test run."""

from collections.abc import Iterator, Sequence

from pydantic import Field

from teams_reporter.models.base import Model


class TestCase(Model):
    """A single leaf test and the outcome reported by the runner.

    ``outcome`` is one of ``expected``, ``unexpected``, ``flaky`` or
    ``skipped`` for runs that completed normally. Other values are kept so
    they can be counted as unclassified.
    """

    __test__ = False

    title: str = Field(..., description="Test title")
    outcome: str = Field(..., description="Runner outcome")


class Suite(Model):
    """A node grouping tests and nested suites."""

    title: str = Field(..., description="Suite title")
    suites: Sequence["Suite"] = Field(default_factory=list)
    tests: Sequence[TestCase] = Field(default_factory=list)

    def walk(self) -> Iterator[tuple["Suite", TestCase]]:
        """Yield ``(parent, test)`` pairs depth-first.

        Tests of a suite come before the tests of its child suites.
        """
        for test in self.tests:
            yield self, test
        for child in self.suites:
            yield from child.walk()

    def all_tests(self) -> Iterator[TestCase]:
        """Yield every descendant leaf test."""
        for _, test in self.walk():
            yield test


class TestRun(Model):
    """Root of the result tree."""

    __test__ = False

    suites: Sequence[Suite] = Field(default_factory=list)

    def all_tests(self) -> Iterator[TestCase]:
        """Yield every leaf test of the run."""
        for suite in self.suites:
            yield from suite.all_tests()
