"""``lilacstat run`` — execute the full status pipeline once.

Loads maintainers, aggregates the build log, renders new terminal
captures and publishes the JSON index.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.panel import Panel

from lilacstat.cli.commands._common import console, fatal_errors, load_config
from lilacstat.core.pipeline import StatusPipeline


def run_cmd(
    packages_dir: Path = typer.Option(
        None, "--packages", "-p", help="Package tree holding one lilac.yaml per package."
    ),
    build_log: Path = typer.Option(
        None, "--build-log", "-b", help="lilac build log."
    ),
    capture_dir: Path = typer.Option(
        None, "--captures", "-c", help="Capture tree of timestamp folders."
    ),
    html_dir: Path = typer.Option(
        None, "--html", help="Destination of rendered HTML pages."
    ),
    checkpoint: Path = typer.Option(
        None, "--checkpoint", help="Render watermark file."
    ),
    index_path: Path = typer.Option(
        None, "--index", "-o", help="Destination of the JSON index."
    ),
    render: bool = typer.Option(
        True, "--render/--no-render", help="Render new terminal captures."
    ),
) -> None:
    """Run the whole pipeline: maintainers, build log, captures, index."""
    config = load_config(
        packages_dir=packages_dir,
        build_log_path=build_log,
        capture_dir=capture_dir,
        html_dir=html_dir,
        checkpoint_path=checkpoint,
        index_path=index_path,
    )

    with fatal_errors():
        summary = StatusPipeline(config).run(render=render)

    lines = [
        "[bold green]Index published.[/bold green]",
        "",
        f"[bold]Packages with maintainers:[/bold] {summary.packages_with_maintainers}",
        f"[bold]Packages in build log:[/bold]     {summary.packages_in_log}",
        f"[bold]Rows published:[/bold]            {summary.rows_published}",
        f"[bold]Index:[/bold]                     {config.index_path}",
    ]
    if summary.render is not None:
        lines += [
            "",
            f"[bold]Folders rendered:[/bold] {len(summary.render.folders_rendered)}",
            f"[bold]Pages written:[/bold]    {summary.render.pages_written}",
            f"[bold]Watermark:[/bold]        {summary.render.watermark}",
        ]
    else:
        lines += ["", "[dim]Capture rendering skipped.[/dim]"]

    console.print(
        Panel("\n".join(lines), title="[bold]lilacstat[/bold]", border_style="green", padding=(1, 2))
    )
