"""Status pipeline — the single entry point for one lilacstat run.

Wires the MaintainerRegistry, the build-log aggregator, the
IncrementalRenderer and the IndexPublisher from a ``StatusConfig``.
Stages run sequentially; the first ``LilacstatError`` aborts the run and
the index is only written once both input maps are complete.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from lilacstat.config import StatusConfig
from lilacstat.core.build_log import parse_build_log
from lilacstat.core.maintainers import MaintainerMap, MaintainerRegistry
from lilacstat.core.publisher import IndexPublisher
from lilacstat.core.renderer import CaptureRenderer, IncrementalRenderer, RenderReport
from lilacstat.core.watermark import Watermark
from lilacstat.models.summary import BuildSummary

logger = logging.getLogger(__name__)


class RunSummary(BaseModel):
    """Counts reported at the end of a run."""

    model_config = ConfigDict(frozen=True)

    packages_with_maintainers: int = 0
    packages_in_log: int = 0
    rows_published: int = 0
    render: RenderReport | None = None


class StatusPipeline:
    """One-shot pipeline over the configured paths.

    Parameters
    ----------
    config:
        Paths and settings. Uses environment-driven defaults if not provided.
    render:
        Optional capture renderer override, forwarded to the
        IncrementalRenderer.
    stylesheet:
        Optional stylesheet override, forwarded to the IncrementalRenderer.
    """

    def __init__(
        self,
        config: StatusConfig | None = None,
        *,
        render: CaptureRenderer | None = None,
        stylesheet: str | None = None,
    ) -> None:
        self.config = config or StatusConfig()
        self._render = render
        self._stylesheet = stylesheet

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def load_maintainers(self) -> MaintainerMap:
        registry = MaintainerRegistry(self.config.packages_dir, self.config.metadata_name)
        return registry.load()

    def load_build_log(self) -> dict[str, BuildSummary]:
        return parse_build_log(self.config.build_log_path)

    def render_captures(self) -> RenderReport:
        renderer = IncrementalRenderer(
            self.config.capture_dir,
            self.config.html_dir,
            Watermark(self.config.checkpoint_path),
            render=self._render,
            stylesheet=self._stylesheet,
        )
        return renderer.run()

    def publish_index(self) -> RunSummary:
        """Build both maps and write the JSON index."""
        return self._publish(self.load_maintainers(), self.load_build_log())

    def _publish(
        self,
        maintainers: MaintainerMap,
        summaries: dict[str, BuildSummary],
        report: RenderReport | None = None,
    ) -> RunSummary:
        publisher = IndexPublisher(
            self.config.index_path, history=self.config.history_length
        )
        rows = publisher.publish(summaries, maintainers)
        return RunSummary(
            packages_with_maintainers=len(maintainers),
            packages_in_log=len(summaries),
            rows_published=len(rows),
            render=report,
        )

    # ------------------------------------------------------------------
    # Full run
    # ------------------------------------------------------------------

    def run(self, *, render: bool = True) -> RunSummary:
        """Run every stage in order: maintainers, build log, captures, index.

        Both maps are loaded before any capture is rendered, so a broken
        metadata file or build log aborts the run with the watermark untouched.
        """
        maintainers = self.load_maintainers()
        summaries = self.load_build_log()
        report = self.render_captures() if render else None

        summary = self._publish(maintainers, summaries, report)
        logger.info(
            "Run complete: %d rows published from %d logged packages",
            summary.rows_published,
            summary.packages_in_log,
        )
        return summary
