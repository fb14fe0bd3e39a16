"""Tests for formcheck.log.configure_logging."""

from __future__ import annotations

import logging
from io import StringIO

from rich.console import Console
from rich.logging import RichHandler

from formcheck.log import PACKAGE_LOGGER, configure_logging


def _rich_handlers(logger: logging.Logger) -> list[RichHandler]:
    return [h for h in logger.handlers if isinstance(h, RichHandler)]


class TestConfigureLogging:
    def test_single_handler_after_repeated_calls(self):
        configure_logging()
        logger = configure_logging("DEBUG")

        assert logger.name == PACKAGE_LOGGER
        assert len(_rich_handlers(logger)) == 1
        assert logger.level == logging.DEBUG

    def test_child_loggers_write_to_console(self):
        buf = StringIO()
        configure_logging("INFO", console=Console(file=buf, width=120, force_terminal=False))

        logging.getLogger("formcheck.pages.home_page").info("Contact form submitted")
        logging.getLogger("formcheck.pages.home_page").debug("hidden detail")

        output = buf.getvalue()
        assert "Contact form submitted" in output
        assert "hidden detail" not in output

    def test_numeric_level(self):
        logger = configure_logging(logging.WARNING)
        assert logger.level == logging.WARNING
