"""Unit tests for timestamp parsing."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import TypeAdapter, ValidationError

from github_manager.hydration.timestamps import INVALID_TIMESTAMP, parse_datetime, to_timestamp
from github_manager.models import Artifact, Step


class TestToTimestamp:
    """Tests for to_timestamp."""

    def test_utc_designator(self):
        assert to_timestamp("2023-01-01T00:00:00Z") == 1672531200000

    def test_fractional_seconds_and_offset(self):
        """Offsets are honoured; the result is always UTC-based."""
        assert to_timestamp("2020-01-20T09:42:40.000-08:00") == 1579542160000

    def test_milliseconds_are_kept(self):
        assert to_timestamp("2023-01-01T00:00:00.250Z") == 1672531200250

    def test_before_epoch_is_negative(self):
        assert to_timestamp("1969-12-31T23:59:59Z") == -1000

    @pytest.mark.parametrize("value", [None, "", "   ", "yesterday", "2023-13-45T99:00:00Z", 1672531200])
    def test_unparseable_values(self, value):
        """Missing or malformed timestamps report -1."""
        assert to_timestamp(value) == INVALID_TIMESTAMP

    def test_naive_datetime_is_utc(self):
        parsed = parse_datetime("2023-01-01T00:00:00")
        assert parsed is not None
        assert parsed.utcoffset().total_seconds() == 0


class TestParseDatetime:
    """parse_datetime agrees with pydantic's datetime type."""

    @pytest.mark.parametrize(
        "value",
        [
            "2023-01-01T00:00:00Z",
            "2023-01-01T00:00:00.123456Z",
            "2020-01-20T09:42:40-08:00",
            "20230101T000000Z",
            "2023-W01-1",
        ],
    )
    def test_matches_pydantic(self, value):
        try:
            expected = TypeAdapter(datetime).validate_python(value)
        except ValidationError:
            expected = None
        parsed = parse_datetime(value)

        if expected is None:
            assert parsed is None
        else:
            assert parsed == expected.replace(tzinfo=expected.tzinfo or timezone.utc)

    @pytest.mark.parametrize("value", ["20230101T000000Z", "2023-W01-1"])
    def test_non_extended_forms_are_rejected(self, value):
        assert parse_datetime(value) is None
        assert to_timestamp(value) == INVALID_TIMESTAMP


class TestTimestampProperty:
    """Tests for the derived epoch accessors on records."""

    def test_record_exposes_epoch_millis(self):
        artifact = Artifact.from_document({"created_at": "2023-01-01T00:00:00Z"})
        assert artifact.created_at == "2023-01-01T00:00:00Z"
        assert artifact.created_at_timestamp == 1672531200000

    def test_missing_field_reports_invalid(self):
        artifact = Artifact.from_document({})
        assert artifact.expires_at_timestamp == -1

    def test_malformed_field_does_not_block_hydration(self):
        """A bad date is kept verbatim and only the accessor reports it."""
        step = Step.from_document({"name": "build", "started_at": "not a date"})
        assert step.name == "build"
        assert step.started_at == "not a date"
        assert step.started_at_timestamp == -1
