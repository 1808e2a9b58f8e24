"""Schema of the per-package ``lilac.yaml`` metadata document.

Only the ``maintainers`` list is read; every other key in the document
belongs to the build daemon and is ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Maintainer(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    github: str
    email: str | None = None


class PackageMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    maintainers: list[Maintainer] = []

    @field_validator("maintainers", mode="before")
    @classmethod
    def _empty_key_means_no_maintainers(cls, value: Any) -> Any:
        # ``maintainers:`` with no entries decodes to None, or "" as plain text
        return [] if value is None or value == "" else value
