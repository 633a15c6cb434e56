"""
Tests for multi-sensor merging.
"""

from datetime import datetime

import pytest

from src.dmr_temperature.core import EmptyDatasetError
from src.dmr_temperature.models import InvalidRow, ValidRow
from src.dmr_temperature.processing import ReadingMerger


def row(hour, minute, temperature, second=0):
    return ValidRow(datetime(2025, 4, 1, hour, minute, second), temperature)


class TestReadingMerger:
    """Test cases for ReadingMerger."""

    @pytest.fixture
    def merger(self):
        """Create merger instance."""
        return ReadingMerger()

    def test_shared_timestamp_is_averaged(self, merger):
        readings, stats = merger.merge([[row(8, 0, 18.0)], [row(8, 0, 22.0)]])

        assert len(readings) == 1
        assert readings[0].temperature == 20.0
        assert readings[0].was_averaged
        assert readings[0].source_count == 2
        assert stats.overlaps_found == 1
        assert stats.duplicates_removed == 1

    def test_distinct_timestamps_kept(self, merger):
        readings, stats = merger.merge([
            [row(8, 0, 18.0), row(8, 30, 19.0)],
            [row(8, 15, 22.0)],
        ])

        assert [r.timestamp.minute for r in readings] == [0, 15, 30]
        assert not any(r.was_averaged for r in readings)
        assert stats.source_record_counts == [2, 1]
        assert stats.merged_count == 3
        assert stats.overlaps_found == 0

    def test_output_is_chronological(self, merger):
        readings, _ = merger.merge([[row(10, 0, 1.0), row(6, 0, 2.0), row(8, 0, 3.0)]])

        timestamps = [r.timestamp for r in readings]
        assert timestamps == sorted(timestamps)

    def test_timestamps_within_a_second_are_matched(self, merger):
        first = ValidRow(datetime(2025, 4, 1, 8, 0, 0, 250000), 10.0)
        second = ValidRow(datetime(2025, 4, 1, 8, 0, 0, 750000), 20.0)

        readings, _ = merger.merge([[first], [second]])

        assert len(readings) == 1
        assert readings[0].temperature == 15.0

    def test_merge_is_idempotent(self, merger):
        source = [row(8, 0, 18.0), row(8, 15, 19.0)]
        once, _ = merger.merge([source])

        again, _ = merger.merge([
            [ValidRow(r.timestamp, r.temperature) for r in once]
        ])

        assert [(r.timestamp, r.temperature) for r in again] == [
            (r.timestamp, r.temperature) for r in once
        ]

    def test_invalid_rows_dropped(self, merger):
        readings, stats = merger.merge([
            [row(8, 0, 18.0), InvalidRow("Invalid temperature: abc", line_number=4)],
        ])

        assert len(readings) == 1
        assert stats.rows_dropped == 1

    def test_no_valid_rows(self, merger):
        with pytest.raises(EmptyDatasetError):
            merger.merge([[InvalidRow("bad")], []])

    def test_no_sources(self, merger):
        with pytest.raises(EmptyDatasetError):
            merger.merge([])
