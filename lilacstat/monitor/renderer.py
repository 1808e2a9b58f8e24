"""Rich terminal renderer for the published build index.

Turns ``PublishedRow``s into a Rich table for a quick look at what the
dashboard will show.

Color scheme
------------
- green : last build succeeded
- red   : last build failed
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from lilacstat.models.summary import BuildOutcome, PublishedRow

_OUTCOME_STYLES: dict[BuildOutcome, str] = {
    BuildOutcome.SUCCESS: "bold green",
    BuildOutcome.FAILURE: "bold red",
}


class IndexRenderer:
    """Renders published rows as Rich terminal output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_rows(self, rows: Sequence[PublishedRow], *, title: str = "Build Status") -> Panel:
        """Render rows, sorted by package name, as a Panel containing a Table."""
        table = Table(
            show_header=True,
            header_style="bold cyan",
            expand=True,
            show_lines=False,
        )
        table.add_column("Package", min_width=20)
        table.add_column("Version")
        table.add_column("Maintainers")
        table.add_column("Last Build", justify="center")
        table.add_column("Took", justify="right")
        table.add_column("History")

        failing = 0
        for row in sorted(rows, key=lambda r: r.name):
            last = row.result[-1] if row.result else None
            if last is BuildOutcome.FAILURE:
                failing += 1
            style = _OUTCOME_STYLES.get(last, "")
            # index fields are plain text, never console markup
            table.add_row(
                Text(row.name, style=style),
                Text(row.version),
                Text(row.maintainers),
                Text(row.time),
                f"{row.during}s",
                "".join(marker.value for marker in row.result),
            )

        summary = f"[bold]Packages:[/bold] {len(rows)}  |  [bold]Failing:[/bold] {failing}"
        from rich.console import Group

        return Panel(
            Group(table, Text(""), Text.from_markup(summary)),
            title=Text(title, style="bold"),
            border_style="blue",
            padding=(1, 2),
        )

    def print_rows(self, rows: Sequence[PublishedRow], *, title: str = "Build Status") -> None:
        self.console.print(self.render_rows(rows, title=title))
