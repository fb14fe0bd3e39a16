"""formcheck execution utilities - bounded polling."""

from formcheck.execution.poll import PollPolicy, poll_until

__all__ = ["PollPolicy", "poll_until"]
