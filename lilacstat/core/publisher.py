"""Index publisher — joins build summaries with maintainers into the JSON index.

Only packages that appear in the build log AND have at least one known
maintainer are published.  Row order follows the summary map and is not
part of the index contract.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from lilacstat.errors import PublishError
from lilacstat.models.summary import BuildSummary, PublishedRow

logger = logging.getLogger(__name__)

HISTORY_LENGTH = 10
MAINTAINER_SEPARATOR = " / "


def last_results(result: Sequence, limit: int = HISTORY_LENGTH) -> list:
    """Return at most the last *limit* entries, oldest first."""
    if len(result) > limit:
        return list(result[-limit:])
    return list(result)


def build_rows(
    summaries: Mapping[str, BuildSummary],
    maintainers: Mapping[str, Sequence[str]],
    *,
    history: int = HISTORY_LENGTH,
) -> list[PublishedRow]:
    """Join summaries with maintainers.

    Packages without maintainers are dropped.  Packages with maintainers
    but no summary never appear because only summary keys are iterated.
    """
    rows: list[PublishedRow] = []
    for name, summary in summaries.items():
        owners = maintainers.get(name) or []
        if not owners:
            continue
        rows.append(
            PublishedRow(
                name=name,
                maintainers=MAINTAINER_SEPARATOR.join(owners),
                time=summary.time,
                during=summary.during,
                version=summary.version,
                result=last_results(summary.result, history),
            )
        )

    dropped = len(summaries) - len(rows)
    if dropped:
        logger.info("Dropped %d packages without a known maintainer", dropped)
    return rows


def index_bytes(rows: Sequence[PublishedRow]) -> bytes:
    """Serialize rows to a compact JSON array (UTF-8, markers unescaped)."""
    data = [row.model_dump(mode="json") for row in rows]
    return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


class IndexPublisher:
    """Writes the joined table to the published index file.

    Parameters
    ----------
    path:
        Destination of the JSON index.  Overwritten on every publish.
    history:
        Number of trailing outcome markers kept per package.
    """

    def __init__(self, path: Path, *, history: int = HISTORY_LENGTH) -> None:
        self._path = Path(path)
        self._history = history

    @property
    def path(self) -> Path:
        return self._path

    def publish(
        self,
        summaries: Mapping[str, BuildSummary],
        maintainers: Mapping[str, Sequence[str]],
    ) -> list[PublishedRow]:
        """Join, serialize and write the index. Returns the published rows."""
        rows = build_rows(summaries, maintainers, history=self._history)
        self.write(rows)
        return rows

    def write(self, rows: Sequence[PublishedRow]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(index_bytes(rows))
        except OSError as exc:
            raise PublishError(f"Cannot write index {self._path}: {exc}") from exc
        logger.info("Published %d rows to %s", len(rows), self._path)

    def read(self) -> list[PublishedRow]:
        """Load a previously published index."""
        try:
            data = json.loads(self._path.read_bytes())
            return [PublishedRow.model_validate(item) for item in data]
        except (OSError, ValueError) as exc:
            raise PublishError(f"Cannot read index {self._path}: {exc}") from exc
