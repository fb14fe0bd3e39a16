"""Playwright implementation of BaseDriver.

Wraps an async playwright Page. open_browser() launches the configured
browser engine and yields a ready driver, closing everything on exit.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urljoin

from playwright.async_api import Page, async_playwright

from formcheck.drivers.base import BaseDriver

if TYPE_CHECKING:
    from formcheck.models.config import ProjectConfig


class PlaywrightDriver(BaseDriver):
    """BaseDriver backed by a playwright.async_api.Page."""

    def __init__(self, page: Page, base_url: str | None = None) -> None:
        self.page = page
        self._base_url = base_url

    def _resolve(self, url: str) -> str:
        if self._base_url and "://" not in url:
            return urljoin(self._base_url.rstrip("/") + "/", url.lstrip("/"))
        return url

    async def navigate(self, url: str) -> None:
        await self.page.goto(self._resolve(url))

    async def wait_for_network_idle(self) -> None:
        await self.page.wait_for_load_state("networkidle")

    async def fill(self, selector: str, text: str) -> None:
        await self.page.locator(selector).fill(text)

    async def click(self, selector: str) -> None:
        await self.page.locator(selector).click()

    async def is_visible(self, selector: str) -> bool:
        return await self.page.locator(selector).is_visible()

    async def wait_for_visible(self, selector: str, timeout_ms: float | None = None) -> None:
        await self.page.locator(selector).wait_for(state="visible", timeout=timeout_ms)

    async def text_content(self, selector: str) -> str:
        return await self.page.locator(selector).text_content() or ""

    async def all_text_contents(self, selector: str) -> list[str]:
        return await self.page.locator(selector).all_text_contents()

    async def screenshot(self, path: Path, full_page: bool = True) -> None:
        await self.page.screenshot(path=str(path), full_page=full_page)

    async def scroll_into_view(self, selector: str) -> None:
        await self.page.locator(selector).scroll_into_view_if_needed()

    async def wait(self, ms: float) -> None:
        await self.page.wait_for_timeout(ms)

    def driver_name(self) -> str:
        return "playwright"


@asynccontextmanager
async def open_browser(config: ProjectConfig) -> AsyncIterator[PlaywrightDriver]:
    """Launch the configured browser and yield a driver on a fresh page.

    Args:
        config: Project config supplying browser engine, headless flag,
            and base URL.

    Yields:
        PlaywrightDriver bound to a new page in a new browser context.
    """
    async with async_playwright() as pw:
        browser_type = getattr(pw, config.browser)
        browser = await browser_type.launch(headless=config.headless)
        try:
            context = await browser.new_context()
            page = await context.new_page()
            try:
                yield PlaywrightDriver(page, base_url=config.base_url)
            finally:
                await context.close()
        finally:
            await browser.close()
