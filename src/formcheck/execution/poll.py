"""Bounded polling for UI state that renders asynchronously.

A predicate is probed a fixed number of times with a fixed delay
between attempts. The sleep function is injectable so tests can
drive the poll without real delays.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from formcheck.models.config import PollConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PollPolicy:
    """How many times to probe and how long to wait between probes."""

    max_attempts: int = 3
    interval: float = 0.5

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.interval < 0:
            raise ValueError(f"interval must be >= 0, got {self.interval}")

    @classmethod
    def from_config(cls, config: PollConfig) -> PollPolicy:
        return cls(max_attempts=config.max_attempts, interval=config.interval_ms / 1000)


async def poll_until(
    predicate: Callable[[], Awaitable[bool]],
    policy: PollPolicy | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> bool:
    """Probe predicate until it returns True or attempts run out.

    An exception raised by the predicate counts as a False probe for
    that attempt; probing continues. No sleep follows the last attempt.

    Args:
        predicate: Callable that creates a new awaitable each call.
        policy: Attempts and interval. Defaults to PollPolicy().
        sleep: Awaitable sleep taking seconds.

    Returns:
        True if any attempt succeeded, False otherwise.
    """
    policy = policy or PollPolicy()

    for attempt in range(policy.max_attempts):
        try:
            if await predicate():
                return True
        except Exception as exc:  # noqa: BLE001
            logger.debug("Probe attempt %d raised %s: %s", attempt + 1, type(exc).__name__, exc)

        if attempt < policy.max_attempts - 1:
            await sleep(policy.interval)

    return False
