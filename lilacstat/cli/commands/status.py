"""``lilacstat status`` — show a published index in the terminal."""

from __future__ import annotations

from pathlib import Path

import typer

from lilacstat.cli.commands._common import console, fatal_errors, load_config
from lilacstat.core.publisher import IndexPublisher
from lilacstat.models.summary import BuildOutcome
from lilacstat.monitor.renderer import IndexRenderer


def status_cmd(
    index_path: Path = typer.Option(
        None, "--index", "-o", help="Published JSON index to read."
    ),
    failing: bool = typer.Option(
        False, "--failing", "-f", help="Only show packages whose last build failed."
    ),
) -> None:
    """Print the published index as a table."""
    config = load_config(index_path=index_path)

    if not config.index_path.exists():
        console.print(f"[bold red]Index not found:[/bold red] {config.index_path}")
        console.print("[dim]Publish one first with: lilacstat run[/dim]")
        raise typer.Exit(code=1)

    with fatal_errors():
        rows = IndexPublisher(config.index_path).read()

    if failing:
        rows = [r for r in rows if r.result and r.result[-1] is BuildOutcome.FAILURE]
    if not rows:
        console.print("[dim]No packages to show.[/dim]")
        return

    IndexRenderer(console=console).print_rows(rows, title=str(config.index_path))
