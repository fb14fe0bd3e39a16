"""Screenshot storage layout."""

from formcheck.storage.screenshots import ScreenshotStore, error_info

__all__ = ["ScreenshotStore", "error_info"]
