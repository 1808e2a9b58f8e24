"""Main Typer application — imports and registers all CLI commands.

Entry point: ``lilacstat`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import typer

from lilacstat.cli.commands._common import load_config
from lilacstat.cli.commands.checkpoint import checkpoint_cmd
from lilacstat.cli.commands.index import index_cmd
from lilacstat.cli.commands.render import render_cmd
from lilacstat.cli.commands.run import run_cmd
from lilacstat.cli.commands.status import status_cmd
from lilacstat.logging_setup import setup_logging

app = typer.Typer(
    name="lilacstat",
    help="lilacstat: publish lilac build logs for the status dashboard.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None, "--log-level", help="Logging level (default: LILACSTAT_LOG_LEVEL or INFO)."
    ),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(load_config(log_level=log_level).log_level)


# Register subcommands
app.command(name="run", help="Run the full pipeline once.")(run_cmd)
app.command(name="render", help="Render new terminal captures to HTML.")(render_cmd)
app.command(name="index", help="Publish the JSON index only.")(index_cmd)
app.command(name="status", help="Show the published index.")(status_cmd)
app.command(name="checkpoint", help="Show or set the render watermark.")(checkpoint_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
