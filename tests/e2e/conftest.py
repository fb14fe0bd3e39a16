"""Fixtures for the live-site contact form suite."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio

from formcheck.drivers.playwright_driver import open_browser
from formcheck.log import configure_logging
from formcheck.models.config import load_project_config
from formcheck.pages.home_page import HomePage
from formcheck.reporting.reporter import TestReporter


@pytest.fixture(scope="session")
def test_reporter() -> Iterator[TestReporter]:
    """One reporter for the whole session; prints its summary at teardown."""
    configure_logging()
    reporter = TestReporter()
    yield reporter
    reporter.print_summary()


@pytest_asyncio.fixture
async def home_page() -> AsyncIterator[HomePage]:
    config = load_project_config()
    async with open_browser(config) as driver:
        page = HomePage(driver, config)
        await page.navigate_to_home_page()
        yield page
