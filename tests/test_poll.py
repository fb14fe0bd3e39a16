"""Tests for formcheck.execution.poll - bounded polling."""

from __future__ import annotations

import pytest

from formcheck.execution.poll import PollPolicy, poll_until
from formcheck.models.config import PollConfig


class FakeClock:
    """Records requested sleeps instead of sleeping."""

    def __init__(self) -> None:
        self.sleeps: list[float] = []

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)


def _scripted(values: list[object]):
    """Predicate returning (or raising) scripted values, counting calls."""
    calls = {"count": 0}

    async def predicate() -> bool:
        value = values[min(calls["count"], len(values) - 1)]
        calls["count"] += 1
        if isinstance(value, Exception):
            raise value
        return bool(value)

    return predicate, calls


class TestPollPolicy:
    """Test PollPolicy construction and validation."""

    def test_defaults(self):
        policy = PollPolicy()
        assert policy.max_attempts == 3
        assert policy.interval == 0.5

    def test_from_config_converts_ms(self):
        policy = PollPolicy.from_config(PollConfig(max_attempts=5, interval_ms=250))
        assert policy.max_attempts == 5
        assert policy.interval == 0.25

    def test_zero_attempts_rejected(self):
        with pytest.raises(ValueError, match="max_attempts"):
            PollPolicy(max_attempts=0)

    def test_negative_interval_rejected(self):
        with pytest.raises(ValueError, match="interval"):
            PollPolicy(interval=-1)


class TestPollUntil:
    """Test poll_until attempt and sleep accounting."""

    @pytest.mark.asyncio
    async def test_immediate_success_no_sleep(self):
        clock = FakeClock()
        predicate, calls = _scripted([True])

        assert await poll_until(predicate, PollPolicy(3, 0.5), sleep=clock.sleep) is True
        assert calls["count"] == 1
        assert clock.sleeps == []

    @pytest.mark.asyncio
    async def test_success_on_third_attempt(self):
        clock = FakeClock()
        predicate, calls = _scripted([False, False, True])

        assert await poll_until(predicate, PollPolicy(3, 0.5), sleep=clock.sleep) is True
        assert calls["count"] == 3
        assert clock.sleeps == [0.5, 0.5]

    @pytest.mark.asyncio
    async def test_exhausted_returns_false(self):
        """Never-true predicate is called max_attempts times with max_attempts-1 sleeps."""
        clock = FakeClock()
        predicate, calls = _scripted([False])

        assert await poll_until(predicate, PollPolicy(4, 0.1), sleep=clock.sleep) is False
        assert calls["count"] == 4
        assert clock.sleeps == [0.1, 0.1, 0.1]

    @pytest.mark.asyncio
    async def test_exception_counts_as_false(self):
        clock = FakeClock()
        predicate, calls = _scripted([RuntimeError("detached"), True])

        assert await poll_until(predicate, PollPolicy(3, 0.5), sleep=clock.sleep) is True
        assert calls["count"] == 2

    @pytest.mark.asyncio
    async def test_exceptions_only_returns_false(self):
        clock = FakeClock()
        predicate, calls = _scripted([TimeoutError("timed out")])

        assert await poll_until(predicate, PollPolicy(3, 0.0), sleep=clock.sleep) is False
        assert calls["count"] == 3

    @pytest.mark.asyncio
    async def test_single_attempt_never_sleeps(self):
        clock = FakeClock()
        predicate, _ = _scripted([False])

        assert await poll_until(predicate, PollPolicy(1, 10.0), sleep=clock.sleep) is False
        assert clock.sleeps == []
