"""Browser drivers - the BaseDriver ABC and its Playwright implementation.

PlaywrightDriver is not re-exported here so that code depending only on
BaseDriver does not import playwright.
"""

from formcheck.drivers.base import BaseDriver

__all__ = ["BaseDriver"]
