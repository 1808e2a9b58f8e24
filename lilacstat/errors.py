"""Error taxonomy for lilacstat runs.

Every failure that must abort a run derives from ``LilacstatError`` so the
CLI can report it in one place.  Semantic skips (unmatched log lines, hidden
package directories, packages without maintainers) are not errors and never
raise.
"""

from __future__ import annotations

from pathlib import Path


class LilacstatError(RuntimeError):
    """Base class for fatal run errors."""


class MaintainerRegistryError(LilacstatError):
    """Raised when the package tree or a metadata file cannot be loaded."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class BuildLogError(LilacstatError):
    """Raised when the build log cannot be read."""


class BuildLogParseError(BuildLogError):
    """Raised when a matching build-log line carries a malformed field."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class CheckpointError(LilacstatError):
    """Raised when the render watermark cannot be read or written."""


class CaptureFolderError(LilacstatError):
    """Raised when the capture tree does not follow the expected layout."""


class PublishError(LilacstatError):
    """Raised when the JSON index cannot be written."""
