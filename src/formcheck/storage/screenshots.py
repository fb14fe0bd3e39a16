"""Screenshot path layout for a test run.

Screenshots are grouped by outcome first, then by run:

    <root>/
        pass/
            <run-timestamp>/
                <testId>_<step>[_<info>].png
        fail/
            <run-timestamp>/
                ...

Directories are created on demand.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Literal

ScreenshotStatus = Literal["pass", "fail"]

_VALID_STATUSES: frozenset[str] = frozenset({"pass", "fail"})
_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9]")


def error_info(error: object | None = None) -> str:
    """Build a filename-safe label from an error.

    Uses the first 20 characters of str(error) with every
    non-alphanumeric character replaced by '-'. Returns 'failure'
    when there is no error.
    """
    if error is None or error == "":
        return "failure"
    return "error-" + _UNSAFE_CHARS.sub("-", str(error)[:20])


class ScreenshotStore:
    """Resolve and create screenshot paths under a root directory."""

    def __init__(self, root: Path | str = "screenshots") -> None:
        self.root = Path(root)

    def path_for(
        self,
        run_timestamp: str,
        test_id: str,
        step: str,
        status: ScreenshotStatus,
        additional_info: str | None = None,
    ) -> Path:
        """Return the path for a screenshot, creating its directory.

        Raises:
            ValueError: If status is not 'pass' or 'fail'.
        """
        if status not in _VALID_STATUSES:
            raise ValueError(f"Screenshot status must be 'pass' or 'fail', got {status!r}")

        target_dir = self.root / status / run_timestamp
        target_dir.mkdir(parents=True, exist_ok=True)
        return target_dir / f"{self.filename(test_id, step, additional_info)}.png"

    @staticmethod
    def filename(test_id: str, step: str, additional_info: str | None = None) -> str:
        if additional_info:
            return f"{test_id}_{step}_{additional_info}"
        return f"{test_id}_{step}"
