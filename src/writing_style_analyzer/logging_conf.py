"""Logging setup for the command-line interface."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """
    Route all log records through a single rich handler.

    Logs go to stderr unless another console is given, keeping stdout
    clean for JSON output.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())
