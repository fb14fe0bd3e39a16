"""Run-scoped test reporter.

Accumulates pass/fail counts and timestamped details per test id for
the lifetime of one run. One instance is constructed per run and shared
by every test (the pytest suite does this with a session fixture), so
the final summary covers the whole run.

Mutations and snapshots are serialized with a lock so tests running in
threads of one process can record concurrently.
"""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable
from datetime import datetime, timezone

from rich.console import Console

from formcheck.models.report import TestDetail, TestRecord, TestSummary
from formcheck.reporting.output import render_summary

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TestReporter:
    """In-memory aggregator of test outcomes keyed by test id."""

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        console: Console | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._records: dict[str, TestRecord] = {}
        self._lock = threading.Lock()
        self._console = console
        self._clock = clock or _utc_now

    def record_test(
        self,
        test_id: str,
        test_name: str,
        passed: bool,
        details: str | None = None,
    ) -> None:
        """Record one execution of a test.

        The first call for a test_id creates its record and fixes its
        name; later calls accumulate onto it.
        """
        with self._lock:
            record = self._records.get(test_id)
            if record is None:
                record = TestRecord(id=test_id, name=test_name)
                self._records[test_id] = record

            if passed:
                record.add_pass(details, timestamp=self._clock())
            else:
                record.add_fail(details, timestamp=self._clock())

        logger.info("Test: %s (%s) - %s", test_name, test_id, "PASSED" if passed else "FAILED")
        if details:
            logger.info("Details: %s", details)

    def get_summary(self) -> TestSummary:
        """Compute a summary snapshot. Does not mutate reporter state."""
        with self._lock:
            test_details = [
                TestDetail(
                    id=r.id,
                    name=r.name,
                    passed=r.passed,
                    failed=r.failed,
                    last_result=r.last_passed,
                    details=list(r.details),
                )
                for r in self._records.values()
            ]

        # Counts come from the copied views so they agree with test_details
        total_tests = len(test_details)
        passed_tests = sum(1 for d in test_details if d.passed > 0)
        failed_tests = sum(1 for d in test_details if d.failed > 0)
        pass_rate = _round_half_up(passed_tests / total_tests * 100) if total_tests else 0

        return TestSummary(
            total_tests=total_tests,
            passed_tests=passed_tests,
            failed_tests=failed_tests,
            total_executions=sum(d.passed + d.failed for d in test_details),
            pass_rate=pass_rate,
            test_details=test_details,
        )

    def print_summary(self, console: Console | None = None) -> None:
        """Render the summary and the last 3 details of each test."""
        render_summary(self.get_summary(), console or self._console or Console())

    def reset(self) -> None:
        """Clear all records."""
        with self._lock:
            self._records.clear()
