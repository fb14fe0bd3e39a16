"""BaseDriver ABC: the browser capabilities page objects rely on.

Page objects and the submission classifier only talk to a BaseDriver,
never to the browser library directly. The Playwright implementation
lives in playwright_driver.py; tests use an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class BaseDriver(ABC):
    """Abstract base class for browser drivers.

    All selectors are CSS selectors. Methods suspend until the browser
    has completed the action.
    """

    @abstractmethod
    async def navigate(self, url: str) -> None:
        """Load url; relative URLs resolve against the driver's base URL."""
        ...

    @abstractmethod
    async def wait_for_network_idle(self) -> None:
        ...

    @abstractmethod
    async def fill(self, selector: str, text: str) -> None:
        ...

    @abstractmethod
    async def click(self, selector: str) -> None:
        ...

    @abstractmethod
    async def is_visible(self, selector: str) -> bool:
        """Return whether the first element matching selector is visible now."""
        ...

    @abstractmethod
    async def wait_for_visible(self, selector: str, timeout_ms: float | None = None) -> None:
        ...

    @abstractmethod
    async def text_content(self, selector: str) -> str:
        """Return the text of the first matching element, or "" if it has none."""
        ...

    @abstractmethod
    async def all_text_contents(self, selector: str) -> list[str]:
        """Return the text of every element matching selector, in document order."""
        ...

    @abstractmethod
    async def screenshot(self, path: Path, full_page: bool = True) -> None:
        ...

    @abstractmethod
    async def scroll_into_view(self, selector: str) -> None:
        ...

    @abstractmethod
    async def wait(self, ms: float) -> None:
        """Pause for ms milliseconds."""
        ...

    def driver_name(self) -> str:
        """Return the driver name. Defaults to the class name."""
        return type(self).__name__
