"""Diagnostic logging setup.

Log records go to stderr through :class:`rich.logging.RichHandler`; stdout
is reserved for protocol responses.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> RichHandler:
    """Install a stderr ``RichHandler`` on the ``toolbridge`` logger.

    Calling it again replaces the previously installed handler.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger("toolbridge")
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper())
    root.propagate = False
    return handler
