"""lilacstat data models — all Pydantic v2."""

from lilacstat.models.metadata import Maintainer, PackageMetadata
from lilacstat.models.summary import BuildOutcome, BuildSummary, PublishedRow

__all__ = [
    # metadata
    "Maintainer",
    "PackageMetadata",
    # summaries
    "BuildOutcome",
    "BuildSummary",
    "PublishedRow",
]
