"""Terminal capture -> HTML fragment transform.

lilac records each build with ``script``-style captures: raw bytes with
embedded ANSI escape sequences.  Rich decodes the escapes and exports the
styled text as HTML with inline styles, so the fragment needs no per-page
stylesheet beyond the shared ``terminal.css`` asset.
"""

from __future__ import annotations

import io
from importlib.resources import files

from rich.console import Console
from rich.text import Text

CAPTURE_WIDTH = 240

_FRAGMENT_FORMAT = "<pre><code>{code}</code></pre>"


def render_capture(raw: bytes) -> str:
    """Render raw capture bytes as an HTML fragment.

    Pure: the same bytes always produce the same fragment.
    """
    decoded = raw.decode("utf-8", errors="replace").replace("\r\n", "\n")
    console = Console(
        file=io.StringIO(),
        record=True,
        width=CAPTURE_WIDTH,
        color_system="truecolor",
        force_terminal=True,
        legacy_windows=False,
    )
    console.print(Text.from_ansi(decoded, no_wrap=True), soft_wrap=True)
    return console.export_html(inline_styles=True, code_format=_FRAGMENT_FORMAT)


def load_stylesheet() -> str:
    """Return the shared terminal stylesheet shipped with the package."""
    return (files("lilacstat") / "assets" / "terminal.css").read_text(encoding="utf-8")
