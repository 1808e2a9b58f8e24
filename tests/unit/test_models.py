"""Tests for lilacstat models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lilacstat.models import BuildOutcome, BuildSummary, PackageMetadata, PublishedRow


class TestBuildOutcome:
    def test_markers(self):
        assert BuildOutcome.SUCCESS.value == "✅"
        assert BuildOutcome.FAILURE.value == "❌"

    def test_from_word(self):
        assert BuildOutcome.from_word("successful") is BuildOutcome.SUCCESS
        assert BuildOutcome.from_word("failed") is BuildOutcome.FAILURE

    def test_from_unknown_word(self):
        with pytest.raises(ValueError):
            BuildOutcome.from_word("skipped")


class TestBuildSummary:
    def test_record_overwrites_and_appends(self):
        summary = BuildSummary(time="t1", during=1, version="1", result=[BuildOutcome.FAILURE])
        summary.record("t2", 2, "2", BuildOutcome.SUCCESS)
        assert (summary.time, summary.during, summary.version) == ("t2", 2, "2")
        assert summary.result == [BuildOutcome.FAILURE, BuildOutcome.SUCCESS]

    def test_negative_duration_rejected(self):
        with pytest.raises(ValidationError):
            BuildSummary(time="t", during=-1, version="1")

    def test_default_result_not_shared(self):
        a = BuildSummary(time="t", during=1, version="1")
        b = BuildSummary(time="t", during=1, version="1")
        a.result.append(BuildOutcome.SUCCESS)
        assert b.result == []


class TestPublishedRow:
    def test_frozen(self):
        row = PublishedRow(name="foo", maintainers="a", time="t", during=1, version="1")
        with pytest.raises(ValidationError):
            row.name = "bar"

    def test_json_key_order(self):
        row = PublishedRow(name="foo", maintainers="a", time="t", during=1, version="1")
        assert list(row.model_dump(mode="json")) == [
            "name", "maintainers", "time", "during", "version", "result",
        ]


class TestPackageMetadata:
    def test_null_maintainers(self):
        assert PackageMetadata.model_validate({"maintainers": None}).maintainers == []

    def test_email_optional(self):
        meta = PackageMetadata.model_validate({"maintainers": [{"github": "alice"}]})
        assert meta.maintainers[0].email is None
