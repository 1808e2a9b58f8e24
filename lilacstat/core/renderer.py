"""Incremental capture renderer — terminal captures to standalone HTML pages.

Source layout:      {capture_dir}/{YYYY-MM-DDThh:mm:ss}/{package}.{ext}
Destination layout: {html_dir}/{package}/{YYYY-MM-DDThh:mm:ss}.html

Each timestamp folder is one lilac build run.  A folder is rendered when
its timestamp is not older than the watermark, so the folder matching the
watermark exactly is rendered again on every run.

The watermark is advanced *before* a folder's files are rendered.  If a
file in that folder fails, the run aborts with the watermark already
pointing at the folder: the next run re-renders it (the boundary is
inclusive), but any older folder that was still pending is skipped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel

from lilacstat.core.terminal import load_stylesheet, render_capture
from lilacstat.core.watermark import Watermark
from lilacstat.errors import CaptureFolderError

logger = logging.getLogger(__name__)

FOLDER_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
FOLDER_NAME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}")

PAGE_TEMPLATE = """
<!DOCTYPE html>
<html>
	<head>
		<meta charset="UTF-8">
		<title>terminal-to-html Preview</title>
		<style>STYLESHEET</style>
	</head>
	<body>
		<div class="term-container">CONTENT</div>
	</body>
</html>
"""

CaptureRenderer = Callable[[bytes], str]


class RenderReport(BaseModel):
    """What one renderer pass did."""

    folders_rendered: list[str] = []
    folders_skipped: int = 0
    pages_written: int = 0
    watermark: int = 0


def parse_folder_timestamp(name: str) -> int:
    """Unix timestamp of a capture folder name (interpreted as UTC)."""
    # strptime alone accepts unpadded fields such as 2024-1-1T0:0:0
    if FOLDER_NAME_RE.fullmatch(name) is None:
        raise CaptureFolderError(f"Capture folder name is not a timestamp: {name!r}")
    try:
        parsed = datetime.strptime(name, FOLDER_TIME_FORMAT)
    except ValueError as exc:
        raise CaptureFolderError(f"Capture folder name is not a timestamp: {name!r}") from exc
    return int(parsed.replace(tzinfo=timezone.utc).timestamp())


def package_name(capture_name: str) -> str:
    """Package of a capture file: the file name minus its final extension."""
    stem, dot, _ext = capture_name.rpartition(".")
    if not dot or not stem:
        raise CaptureFolderError(f"Capture file has no package extension: {capture_name!r}")
    return stem


def build_page(fragment: str, stylesheet: str) -> str:
    """Splice a rendered fragment and the stylesheet into the page template."""
    page = PAGE_TEMPLATE.replace("CONTENT", fragment, 1)
    return page.replace("STYLESHEET", stylesheet, 1)


class IncrementalRenderer:
    """Renders capture folders newer than the watermark.

    Parameters
    ----------
    source:
        Capture tree root.
    destination:
        HTML tree root.  Package subdirectories are created on demand.
    watermark:
        The checkpoint to read and advance.
    render:
        Capture bytes -> HTML fragment.  Defaults to the Rich-based
        ``render_capture``.
    stylesheet:
        Stylesheet text embedded in every page.  Defaults to the packaged
        ``terminal.css``.
    """

    def __init__(
        self,
        source: Path,
        destination: Path,
        watermark: Watermark,
        *,
        render: CaptureRenderer | None = None,
        stylesheet: str | None = None,
    ) -> None:
        self._source = Path(source)
        self._destination = Path(destination)
        self._watermark = watermark
        self._render = render or render_capture
        self._stylesheet = stylesheet if stylesheet is not None else load_stylesheet()

    def _capture_folders(self) -> list[tuple[int, Path]]:
        try:
            entries = sorted(p for p in self._source.iterdir() if p.is_dir())
        except OSError as exc:
            raise CaptureFolderError(f"Cannot list capture tree {self._source}: {exc}") from exc
        return [(parse_folder_timestamp(p.name), p) for p in entries]

    def run(self) -> RenderReport:
        """Render every pending folder and return what was done."""
        current = self._watermark.read()
        report = RenderReport(watermark=current)

        for timestamp, folder in self._capture_folders():
            if timestamp < current:
                report.folders_skipped += 1
                continue

            current = timestamp
            self._watermark.write(current)
            report.watermark = current

            report.pages_written += self.render_folder(folder)
            report.folders_rendered.append(folder.name)

        logger.info(
            "Rendered %d pages from %d folders (%d already done), watermark %d",
            report.pages_written,
            len(report.folders_rendered),
            report.folders_skipped,
            report.watermark,
        )
        return report

    def render_folder(self, folder: Path) -> int:
        """Render every capture in one run folder. Returns the page count."""
        try:
            captures = sorted(p for p in folder.iterdir() if p.is_file())
        except OSError as exc:
            raise CaptureFolderError(f"Cannot list capture folder {folder}: {exc}") from exc

        for capture in captures:
            target_dir = self._destination / package_name(capture.name)
            target_file = target_dir / f"{folder.name}.html"
            try:
                target_dir.mkdir(parents=True, exist_ok=True)
                page = self.render_page(capture.read_bytes())
                target_file.write_text(page, encoding="utf-8")
            except OSError as exc:
                raise CaptureFolderError(f"Cannot render {capture}: {exc}") from exc
            logger.debug("Rendered %s to %s", capture, target_file)

        return len(captures)

    def render_page(self, raw: bytes) -> str:
        return build_page(self._render(raw), self._stylesheet)
