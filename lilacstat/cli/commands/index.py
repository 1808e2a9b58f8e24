"""``lilacstat index`` — publish the JSON index without rendering captures."""

from __future__ import annotations

from pathlib import Path

import typer

from lilacstat.cli.commands._common import console, fatal_errors, load_config
from lilacstat.core.pipeline import StatusPipeline


def index_cmd(
    packages_dir: Path = typer.Option(
        None, "--packages", "-p", help="Package tree holding one lilac.yaml per package."
    ),
    build_log: Path = typer.Option(
        None, "--build-log", "-b", help="lilac build log."
    ),
    index_path: Path = typer.Option(
        None, "--index", "-o", help="Destination of the JSON index."
    ),
) -> None:
    """Join maintainers with the build log and write the JSON index."""
    config = load_config(
        packages_dir=packages_dir,
        build_log_path=build_log,
        index_path=index_path,
    )

    with fatal_errors():
        summary = StatusPipeline(config).publish_index()

    console.print(
        f"[bold green]Published {summary.rows_published} rows[/bold green] "
        f"to {config.index_path} "
        f"[dim]({summary.packages_in_log} packages in log, "
        f"{summary.packages_with_maintainers} with maintainers)[/dim]"
    )
