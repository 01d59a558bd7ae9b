"""Unit tests for enum coercion."""

from __future__ import annotations

import pytest

from github_manager.exceptions import HydrationError, MalformedEnumError
from github_manager.hydration.enums import coerce_enum, enum_values
from github_manager.models import JobStatus, LabelType, LockReason


class TestCoerceEnum:
    """Tests for coerce_enum."""

    def test_exact_match(self):
        assert coerce_enum(JobStatus, "in_progress", field="status") is JobStatus.IN_PROGRESS

    def test_wire_value_with_hyphen(self):
        """Wire strings that are not identifiers still map to members."""
        assert coerce_enum(LabelType, "read-only", field="type") is LabelType.READ_ONLY

    def test_member_passes_through(self):
        assert coerce_enum(JobStatus, JobStatus.QUEUED, field="status") is JobStatus.QUEUED

    def test_none_returns_default(self):
        assert coerce_enum(JobStatus, None, field="status") is None
        assert coerce_enum(JobStatus, None, field="status", default=JobStatus.QUEUED) is JobStatus.QUEUED

    def test_unknown_value_raises(self):
        """Values outside the symbol set abort hydration."""
        with pytest.raises(MalformedEnumError) as exc_info:
            coerce_enum(JobStatus, "bogus_value", field="status", record="Job")

        error = exc_info.value
        assert error.field == "status"
        assert error.value == "bogus_value"
        assert error.record == "Job"
        assert "queued" in error.allowed
        assert isinstance(error, HydrationError)

    def test_match_is_case_sensitive(self):
        with pytest.raises(MalformedEnumError):
            coerce_enum(JobStatus, "COMPLETED", field="status")

    def test_non_string_raises(self):
        with pytest.raises(MalformedEnumError):
            coerce_enum(JobStatus, 3, field="status")


class TestGitHubEnum:
    """Tests for the wire-string enum base."""

    def test_str_is_wire_value(self):
        assert str(LockReason.OFF_TOPIC) == "off-topic"

    def test_compares_equal_to_wire_value(self):
        assert LockReason.TOO_HEATED == "too heated"

    def test_enum_values_in_declaration_order(self):
        assert enum_values(LabelType) == ("read-only", "custom")
