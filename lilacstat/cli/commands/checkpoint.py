"""``lilacstat checkpoint`` — show or seed the render watermark.

The renderer never invents a starting point, so a new deployment seeds
the checkpoint explicitly, e.g. ``lilacstat checkpoint --set 0``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import typer

from lilacstat.cli.commands._common import console, fatal_errors, load_config
from lilacstat.core.watermark import Watermark


def checkpoint_cmd(
    checkpoint: Path = typer.Option(
        None, "--checkpoint", help="Render watermark file."
    ),
    set_to: int = typer.Option(
        None, "--set", help="Overwrite the watermark with this Unix timestamp."
    ),
) -> None:
    """Show the render watermark, or set it with --set."""
    config = load_config(checkpoint_path=checkpoint)
    watermark = Watermark(config.checkpoint_path)

    if set_to is not None and _as_utc(set_to) is None:
        console.print(f"[bold red]Timestamp out of range:[/bold red] {set_to}")
        raise typer.Exit(code=1)

    with fatal_errors():
        if set_to is not None:
            watermark.initialize(set_to)
        value = watermark.read()

    as_time = _as_utc(value)
    if as_time is None:
        console.print(f"[bold]{value}[/bold] [dim](outside the datetime range)[/dim]")
    else:
        console.print(f"[bold]{value}[/bold] [dim]({as_time} UTC)[/dim]")


def _as_utc(timestamp: int) -> str | None:
    try:
        moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
    return moment.strftime("%Y-%m-%dT%H:%M:%S")
