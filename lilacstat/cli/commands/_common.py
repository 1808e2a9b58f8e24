"""Shared helpers for lilacstat CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from lilacstat.config import StatusConfig
from lilacstat.errors import LilacstatError

logger = logging.getLogger("lilacstat.cli")

console = Console()


def load_config(**overrides: Any) -> StatusConfig:
    """Build the run config, letting explicit CLI options win over env/.env."""
    try:
        return StatusConfig(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as exc:
        console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@contextmanager
def fatal_errors() -> Iterator[None]:
    """Report a ``LilacstatError`` and exit with code 1."""
    try:
        yield
    except LilacstatError as exc:
        logger.error("Run aborted: %s", exc)
        console.print(f"[bold red]Run aborted:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

