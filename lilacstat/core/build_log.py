"""Build-log aggregator — folds lilac's text build log into per-package summaries.

A log line of interest looks like::

    [2024-01-01T00:00:00] foo 1.0-1 [1.0-1] successful after 12s

Everything else in the log is ignored.  Lines are folded strictly in file
order, so the last line for a package decides its time, duration and
version, while every line contributes one outcome marker.

A matching line whose duration does not parse raises ``BuildLogParseError``
rather than being skipped.  With the ASCII digit group of ``BUILD_LINE_RE``
that cannot happen today; the check keeps the abort-on-bad-data policy if
the pattern is ever loosened.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from lilacstat.errors import BuildLogError, BuildLogParseError
from lilacstat.models.summary import BuildOutcome, BuildSummary

logger = logging.getLogger(__name__)

BUILD_LINE_RE = re.compile(
    r"\[(.*?)] (.*?) .*? \[(.*?)] (successful|failed) after (\d+)s",
    re.ASCII,
)


class BuildLogAggregator:
    """Accumulator for build-log lines.

    Feed lines in file order with ``feed_line`` or ``feed`` and read the
    result from ``summaries``.  Each instance owns its map; nothing is
    shared between runs.
    """

    def __init__(self) -> None:
        self._summaries: dict[str, BuildSummary] = {}
        self._line_number = 0
        self._matched = 0

    @property
    def summaries(self) -> dict[str, BuildSummary]:
        return self._summaries

    @property
    def matched_lines(self) -> int:
        return self._matched

    def feed_line(self, line: str) -> bool:
        """Fold one line into the aggregate.

        Returns True if the line matched the build pattern.
        """
        self._line_number += 1
        match = BUILD_LINE_RE.search(line)
        if match is None:
            return False

        time, package, version, word, raw_during = match.groups()
        try:
            during = int(raw_during)
        except ValueError as exc:
            raise BuildLogParseError(
                f"Malformed duration {raw_during!r} on line {self._line_number}",
                line_number=self._line_number,
            ) from exc
        outcome = BuildOutcome.from_word(word)

        summary = self._summaries.get(package)
        if summary is None:
            self._summaries[package] = BuildSummary(
                time=time, during=during, version=version, result=[outcome]
            )
        else:
            summary.record(time, during, version, outcome)
        self._matched += 1
        return True

    def feed(self, lines: Iterable[str]) -> BuildLogAggregator:
        for line in lines:
            self.feed_line(line)
        return self


def parse_build_log(path: Path) -> dict[str, BuildSummary]:
    """Read the whole build log at *path* and aggregate it."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise BuildLogError(f"Cannot read build log {path}: {exc}") from exc

    aggregator = BuildLogAggregator().feed(text.split("\n"))
    logger.info(
        "Parsed %d build records for %d packages from %s",
        aggregator.matched_lines,
        len(aggregator.summaries),
        path,
    )
    return aggregator.summaries
