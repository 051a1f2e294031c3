"""Test factories for generating result trees."""

from collections.abc import Sequence

from polyfactory import Use
from polyfactory.factories.pydantic_factory import ModelFactory

from teams_reporter.models.tree import Suite, TestCase, TestRun


class TestCaseFactory(ModelFactory[TestCase]):
    """Factory for TestCase."""

    __test__ = False

    outcome = "expected"


class SuiteFactory(ModelFactory[Suite]):
    """Factory for Suite."""

    suites = Use(list[Suite])
    tests = Use(list[TestCase])


class TestRunFactory(ModelFactory[TestRun]):
    """Factory for TestRun."""

    __test__ = False

    suites = Use(list[Suite])


def suite_with_outcomes(title: str, outcomes: Sequence[str]) -> Suite:
    """Build a suite holding one test per outcome, titled ``test-<index>``."""
    return SuiteFactory.build(
        title=title,
        tests=[
            TestCaseFactory.build(title=f"test-{index}", outcome=outcome)
            for index, outcome in enumerate(outcomes)
        ],
    )
