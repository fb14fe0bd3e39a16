"""Reporting models: per-test records and the derived run summary.

TestRecord is the only mutable model here; it is owned by the
TestReporter. TestDetail and TestSummary are read-only snapshots
recomputed on demand.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def iso_timestamp(moment: datetime | None = None) -> str:
    """Format a UTC instant as ISO-8601 with millisecond precision and a Z suffix."""
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


class TestRecord(BaseModel):
    """Accumulated pass/fail history for one test identifier."""

    __test__ = False  # not a pytest test class

    id: str
    name: str
    passed: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    last_passed: bool = False
    details: list[str] = Field(default_factory=list)

    @property
    def total_runs(self) -> int:
        return self.passed + self.failed

    def add_pass(self, detail: str | None = None, timestamp: datetime | None = None) -> None:
        """Record a passing execution, appending a timestamped detail if given."""
        self.passed += 1
        self.last_passed = True
        if detail:
            self.details.append(f"PASS [{iso_timestamp(timestamp)}]: {detail}")

    def add_fail(self, detail: str | None = None, timestamp: datetime | None = None) -> None:
        """Record a failing execution, appending a timestamped detail if given."""
        self.failed += 1
        self.last_passed = False
        if detail:
            self.details.append(f"FAIL [{iso_timestamp(timestamp)}]: {detail}")


class TestDetail(BaseModel):
    """Per-test view inside a TestSummary."""

    __test__ = False

    model_config = {"frozen": True}

    id: str
    name: str
    passed: int
    failed: int
    last_result: bool
    details: list[str] = Field(default_factory=list)


class TestSummary(BaseModel):
    """Aggregate view across every record of a run.

    passed_tests and failed_tests are existence counts, so one test that
    both passed and failed at some point is counted in each.
    """

    __test__ = False

    model_config = {"frozen": True}

    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0
    total_executions: int = 0
    pass_rate: int = 0
    test_details: list[TestDetail] = Field(default_factory=list)
