"""Build summary models — the aggregated log state and the published row."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BuildOutcome(str, Enum):
    """Outcome marker recorded for a single build-log line."""

    SUCCESS = "✅"
    FAILURE = "❌"

    @classmethod
    def from_word(cls, word: str) -> BuildOutcome:
        """Map the log's ``successful``/``failed`` keyword to a marker."""
        if word == "successful":
            return cls.SUCCESS
        if word == "failed":
            return cls.FAILURE
        raise ValueError(f"Unknown build outcome: {word!r}")


class BuildSummary(BaseModel):
    """Latest build state of one package.

    ``time``, ``during`` and ``version`` always reflect the most recently
    parsed line for the package; ``result`` grows by one marker per line,
    oldest first.  Mutable: the aggregator updates it in place.
    """

    time: str
    during: int = Field(ge=0)
    version: str
    result: list[BuildOutcome] = []

    def record(self, time: str, during: int, version: str, outcome: BuildOutcome) -> None:
        self.time = time
        self.during = during
        self.version = version
        self.result.append(outcome)


class PublishedRow(BaseModel):
    """One row of the published JSON index.

    Field order is the serialized key order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    maintainers: str
    time: str
    during: int
    version: str
    result: list[BuildOutcome] = []
