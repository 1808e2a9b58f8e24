"""``lilacstat render`` — render new terminal captures to HTML only."""

from __future__ import annotations

from pathlib import Path

import typer

from lilacstat.cli.commands._common import console, fatal_errors, load_config
from lilacstat.core.pipeline import StatusPipeline


def render_cmd(
    capture_dir: Path = typer.Option(
        None, "--captures", "-c", help="Capture tree of timestamp folders."
    ),
    html_dir: Path = typer.Option(
        None, "--html", help="Destination of rendered HTML pages."
    ),
    checkpoint: Path = typer.Option(
        None, "--checkpoint", help="Render watermark file."
    ),
) -> None:
    """Render capture folders at or after the watermark."""
    config = load_config(
        capture_dir=capture_dir,
        html_dir=html_dir,
        checkpoint_path=checkpoint,
    )

    with fatal_errors():
        report = StatusPipeline(config).render_captures()

    if not report.folders_rendered:
        console.print("[dim]Nothing to render.[/dim]")
    for name in report.folders_rendered:
        console.print(f"  [cyan]{name}[/cyan]")
    console.print(
        f"[bold]{report.pages_written}[/bold] pages written, "
        f"{report.folders_skipped} folders already done, watermark {report.watermark}"
    )
