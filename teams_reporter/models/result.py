"""Models for aggregation and delivery results."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class OutcomeTally:
    """Outcome counters for one test run.

    ``unclassified`` counts leaves whose outcome is outside the known set,
    so the five counters always add up to the number of leaves visited.
    """

    passed: int = 0
    flaky: int = 0
    failed: int = 0
    skipped: int = 0
    unclassified: int = 0

    @property
    def total(self) -> int:
        return (
            self.passed + self.flaky + self.failed + self.skipped + self.unclassified
        )

    @property
    def is_success(self) -> bool:
        return self.failed == 0


@dataclass(frozen=True, kw_only=True)
class DeliveryResult:
    """Result of a single webhook POST."""

    status: Literal["sent", "send-failed"]
    http_status: int | None = None
    body: str | None = None


@dataclass(frozen=True, kw_only=True)
class ReportOutcome:
    """Terminal state of one reporter invocation."""

    status: Literal["sent", "send-failed", "skipped"]
    reason: str | None = None
    delivery: DeliveryResult | None = None
