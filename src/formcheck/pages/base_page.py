"""BasePage: shared driver helpers and screenshot capture for page objects.

The run timestamp is fixed the first time any BasePage is constructed
in the process and shared by every screenshot of the run.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from formcheck.models.config import ProjectConfig
from formcheck.storage.screenshots import ScreenshotStatus, ScreenshotStore, error_info

if TYPE_CHECKING:
    from formcheck.drivers.base import BaseDriver

logger = logging.getLogger(__name__)


def make_run_timestamp(moment: datetime | None = None) -> str:
    """Format a UTC instant as a filesystem-safe ISO-8601 timestamp.

    Example: 2026-10-19T10-20-30-123Z
    """
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H-%M-%S-") + f"{moment.microsecond // 1000:03d}Z"


class BasePage:
    """Foundation for all page objects.

    Wraps a BaseDriver with selector-based helpers and standardized
    screenshot naming via ScreenshotStore.
    """

    _run_timestamp: ClassVar[str | None] = None

    def __init__(
        self,
        driver: BaseDriver,
        config: ProjectConfig | None = None,
        store: ScreenshotStore | None = None,
    ) -> None:
        self.driver = driver
        self.config = config or ProjectConfig()
        self.store = store or ScreenshotStore(self.config.screenshots_dir)
        if BasePage._run_timestamp is None:
            BasePage._run_timestamp = make_run_timestamp()

    @property
    def run_timestamp(self) -> str:
        if BasePage._run_timestamp is None:
            raise RuntimeError("Run timestamp is not set")
        return BasePage._run_timestamp

    async def navigate(self, url: str) -> None:
        await self.driver.navigate(url)

    async def wait_for_page_load(self) -> None:
        await self.driver.wait_for_network_idle()

    async def fill_text(self, selector: str, text: str) -> None:
        await self.driver.fill(selector, text)

    async def click_element(self, selector: str) -> None:
        await self.driver.click(selector)

    async def is_visible(self, selector: str) -> bool:
        return await self.driver.is_visible(selector)

    async def wait_for_element_visible(self, selector: str, timeout_ms: float | None = None) -> None:
        await self.driver.wait_for_visible(selector, timeout_ms)

    async def get_element_text(self, selector: str) -> str:
        return await self.driver.text_content(selector)

    async def take_screenshot(
        self,
        test_id: str,
        step: str,
        status: ScreenshotStatus,
        additional_info: str | None = None,
    ) -> Path:
        """Capture a full-page screenshot under the run's directory.

        Args:
            test_id: Test identifier, e.g. 'CONTACT-01'.
            step: Step description, e.g. 'after-submit'.
            status: 'pass' or 'fail'; selects the top-level directory.
            additional_info: Optional suffix for the filename.

        Returns:
            Path of the written screenshot.
        """
        path = self.store.path_for(self.run_timestamp, test_id, step, status, additional_info)
        logger.info("Screenshot captured: %s/%s/%s", status, self.run_timestamp, path.name)
        await self.driver.screenshot(path, full_page=True)
        return path

    async def screenshot_step(self, test_id: str, step: str) -> Path:
        """Capture the current step regardless of outcome."""
        return await self.take_screenshot(test_id, step, "pass")

    async def screenshot_success(self, test_id: str, step: str) -> Path:
        return await self.take_screenshot(test_id, step, "pass", "success")

    async def screenshot_failure(self, test_id: str, step: str, error: object | None = None) -> Path:
        return await self.take_screenshot(test_id, step, "fail", error_info(error))

    async def try_screenshot(self, capture: Awaitable[Path]) -> Path | None:
        """Await a screenshot helper; log and return None if capture fails."""
        try:
            return await capture
        except Exception as exc:  # noqa: BLE001
            logger.warning("Screenshot could not be captured: %s: %s", type(exc).__name__, exc)
            return None

    async def wait_ms(self, ms: float) -> None:
        if ms > 0:
            await self.driver.wait(ms)
