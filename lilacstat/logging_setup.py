"""Logging setup for command-line runs.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
CLI calls ``setup_logging`` once to attach a Rich handler to the root
logger.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_FORMAT = "%(name)s: %(message)s"


def setup_logging(level: str = "INFO", *, console: Console | None = None, force: bool = False) -> None:
    """Configure the root logger (unless already configured and not *force*)."""
    root = logging.getLogger()
    if getattr(setup_logging, "_configured", False) and not force:
        root.setLevel(_level_from_name(level))
        return
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    root.addHandler(handler)
    root.setLevel(_level_from_name(level))
    setup_logging._configured = True  # type: ignore[attr-defined]


def _level_from_name(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO
