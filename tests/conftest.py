"""Shared pytest configuration: opt-in flag for live-site tests."""

from __future__ import annotations

import pytest

from formcheck.pages.base_page import BasePage


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="Run tests marked e2e against the live site (needs playwright browsers)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="live-site test; pass --e2e to run")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture
def fixed_run_timestamp(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin the process-wide run timestamp for predictable screenshot paths."""
    timestamp = "2026-10-19T10-20-30-123Z"
    monkeypatch.setattr(BasePage, "_run_timestamp", timestamp)
    return timestamp
