"""Tests for diagnostic logging setup."""

from __future__ import annotations

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from toolbridge.utils.log_config import LOG_LEVELS, configure_logging


def _console(buf: io.StringIO) -> Console:
    return Console(file=buf, width=200, color_system=None)


class TestConfigureLogging:
    def test_installs_rich_handler(self) -> None:
        handler = configure_logging("INFO", console=_console(io.StringIO()))

        logger = logging.getLogger("toolbridge")
        assert isinstance(handler, RichHandler)
        assert handler in logger.handlers
        assert logger.level == logging.INFO
        assert logger.propagate is False

    def test_replaces_previous_handler(self) -> None:
        first = configure_logging(console=_console(io.StringIO()))
        second = configure_logging(console=_console(io.StringIO()))

        handlers = [h for h in logging.getLogger("toolbridge").handlers if isinstance(h, RichHandler)]
        assert handlers == [second]
        assert first not in handlers

    def test_level_is_case_insensitive(self) -> None:
        configure_logging("debug", console=_console(io.StringIO()))
        assert logging.getLogger("toolbridge").level == logging.DEBUG

    def test_child_records_reach_console(self) -> None:
        buf = io.StringIO()
        configure_logging("WARNING", console=_console(buf))

        logging.getLogger("toolbridge.server.dispatcher").warning("Tool not found: nope")
        logging.getLogger("toolbridge.server.dispatcher").info("hidden")

        assert "Tool not found: nope" in buf.getvalue()
        assert "hidden" not in buf.getvalue()

    def test_default_console_is_stderr(self) -> None:
        handler = configure_logging()
        assert handler.console.stderr is True


def test_log_levels() -> None:
    assert LOG_LEVELS == ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
