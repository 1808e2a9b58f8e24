"""Terminal view of the published build index."""

from lilacstat.monitor.renderer import IndexRenderer

__all__ = ["IndexRenderer"]
