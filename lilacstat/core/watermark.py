"""Render watermark — the persisted checkpoint of the incremental renderer.

The checkpoint file holds a single Unix timestamp as decimal text.  Capture
folders older than the watermark are considered rendered.  There is no
default: a missing or unparseable file aborts the run instead of silently
re-rendering the whole capture tree.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from lilacstat.errors import CheckpointError

logger = logging.getLogger(__name__)

_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")


class Watermark:
    """File-backed watermark.

    Parameters
    ----------
    path:
        Checkpoint file.  Its parent directory must already exist.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> int:
        """Return the persisted watermark."""
        try:
            raw = self._path.read_text(encoding="ascii")
        except (OSError, UnicodeDecodeError) as exc:
            raise CheckpointError(f"Cannot read checkpoint {self._path}: {exc}") from exc
        text = raw.strip()
        # int() alone also takes forms like 1_000
        if _TIMESTAMP_RE.fullmatch(text) is None:
            raise CheckpointError(
                f"Checkpoint {self._path} does not hold an integer: {raw!r}"
            )
        return int(text)

    def write(self, timestamp: int) -> None:
        """Overwrite the checkpoint in place."""
        try:
            self._path.write_text(str(int(timestamp)), encoding="ascii")
        except OSError as exc:
            raise CheckpointError(f"Cannot write checkpoint {self._path}: {exc}") from exc
        logger.debug("Watermark advanced to %d", timestamp)

    def initialize(self, timestamp: int = 0) -> None:
        """Seed the checkpoint file, creating its parent directory."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CheckpointError(f"Cannot create {self._path.parent}: {exc}") from exc
        self.write(timestamp)
