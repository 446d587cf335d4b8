"""Tests for the dataset models."""

import pytest
from pydantic import ValidationError

from contiguity.interval import SimpleInterval
from contiguity.models import InsertReport, IntervalDataset, IntervalRecord


# --- IntervalRecord ---


class TestIntervalRecord:
    """Tests for IntervalRecord."""

    def test_record_value_defaults_to_none(self):
        """Test that value is optional."""
        record = IntervalRecord(start=1, end=2)
        assert record.value is None

    def test_record_zero_length_allowed(self):
        """Test that start == end passes validation."""
        record = IntervalRecord(start=4, end=4, value="marker")
        assert record.start == record.end == 4

    def test_record_reversed_bounds_rejected(self):
        """Test that start after end raises a validation error."""
        with pytest.raises(ValidationError, match="is after end"):
            IntervalRecord(start=5, end=1)

    def test_record_incomparable_bounds_rejected(self):
        """Test that bounds of incomparable types raise a validation error."""
        with pytest.raises(ValidationError, match="not comparable"):
            IntervalRecord(start=1, end="b")

    def test_record_bounds_check_skipped_by_context(self):
        """Test that a context with validate_intervals off accepts reversed bounds."""
        record = IntervalRecord.model_validate(
            {"start": 5, "end": 1}, context={"validate_intervals": False}
        )
        assert (record.start, record.end) == (5, 1)

    def test_record_bounds_checked_with_context_on(self):
        """Test that validate_intervals=True in the context keeps the check."""
        with pytest.raises(ValidationError, match="is after end"):
            IntervalRecord.model_validate(
                {"start": 5, "end": 1}, context={"validate_intervals": True}
            )

    def test_record_to_interval(self):
        """Test that to_interval converts bounds into a SimpleInterval."""
        record = IntervalRecord(start=1, end=3, value="x")
        assert record.to_interval() == SimpleInterval(start=1, end=3)


# --- IntervalDataset ---


class TestIntervalDataset:
    """Tests for IntervalDataset."""

    def test_dataset_defaults(self):
        """Test that only the name is required."""
        dataset = IntervalDataset(name="empty")
        assert dataset.description == ""
        assert dataset.intervals == []
        assert dataset.points == []

    def test_dataset_parses_nested_records(self, schedule_data):
        """Test that interval mappings become IntervalRecord models."""
        dataset = IntervalDataset(**schedule_data)
        assert len(dataset.intervals) == 6
        assert isinstance(dataset.intervals[0], IntervalRecord)
        assert dataset.intervals[0].value == "standup"
        assert dataset.points == [0, 5, 9, 20]

    def test_dataset_requires_name(self):
        """Test that a dataset without a name fails validation."""
        with pytest.raises(ValidationError):
            IntervalDataset()  # type: ignore[call-arg]


# --- InsertReport ---


class TestInsertReport:
    """Tests for InsertReport."""

    def test_report_counts(self):
        """Test that counts follow the accepted and rejected lists."""
        report = InsertReport(
            accepted=[IntervalRecord(start=1, end=2), IntervalRecord(start=2, end=3)],
            rejected=[IntervalRecord(start=1, end=3)],
        )
        assert report.accepted_count == 2
        assert report.rejected_count == 1

    def test_report_defaults_empty(self):
        """Test that a fresh report has no records."""
        report = InsertReport()
        assert report.accepted_count == 0
        assert report.rejected_count == 0
