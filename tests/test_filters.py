"""
Tests for discharge schedules and reading filters.
"""

from datetime import date, datetime, time

import pytest

from src.dmr_temperature.core import InvalidDischargePeriodError
from src.dmr_temperature.models import DischargePeriod, TemperatureReading
from src.dmr_temperature.processing import (
    CalendarBucketer,
    DataProcessor,
    DateRangeFilter,
    DischargePeriodFilter,
    DischargeSchedule,
)


class TestDischargePeriod:
    """Test cases for DischargePeriod."""

    def test_bounds_inclusive(self):
        period = DischargePeriod(datetime(2025, 4, 1, 8), datetime(2025, 4, 1, 16))

        assert period.contains(datetime(2025, 4, 1, 8))
        assert period.contains(datetime(2025, 4, 1, 16))
        assert not period.contains(datetime(2025, 4, 1, 16, 0, 1))
        assert period.duration_hours == 8.0

    def test_end_must_follow_start(self):
        with pytest.raises(InvalidDischargePeriodError):
            DischargePeriod(datetime(2025, 4, 1, 8), datetime(2025, 4, 1, 8))


class TestDischargePeriodFilter:
    """Test cases for DischargePeriodFilter."""

    @pytest.fixture
    def period_filter(self):
        """Create filter instance."""
        return DischargePeriodFilter()

    def test_no_periods_keeps_everything(self, period_filter, make_readings):
        readings = make_readings(datetime(2025, 4, 1), days=1)
        assert period_filter.filter(readings, []) == readings

    def test_union_of_periods(self, period_filter, make_readings):
        readings = make_readings(datetime(2025, 4, 1), days=1, interval_minutes=60)
        periods = [
            DischargePeriod(datetime(2025, 4, 1, 2), datetime(2025, 4, 1, 4)),
            DischargePeriod(datetime(2025, 4, 1, 3), datetime(2025, 4, 1, 6)),
        ]

        filtered = period_filter.filter(readings, periods)

        assert [r.timestamp.hour for r in filtered] == [2, 3, 4, 5, 6]

    def test_period_index_by_day(self, period_filter, make_readings):
        readings = make_readings(datetime(2025, 4, 1), days=3, interval_minutes=360)
        periods = [
            DischargePeriod(datetime(2025, 4, 1), datetime(2025, 4, 2, 12)),
            DischargePeriod(datetime(2025, 4, 3), datetime(2025, 4, 3, 23)),
        ]
        buckets = CalendarBucketer.bucket_by_day(period_filter.filter(readings, periods))

        mapping = period_filter.period_index_by_day(buckets, periods)

        assert mapping == {
            date(2025, 4, 1): 0,
            date(2025, 4, 2): 0,
            date(2025, 4, 3): 1,
        }

    def test_day_split_across_periods_left_out(self, period_filter, make_readings):
        periods = [
            DischargePeriod(datetime(2025, 4, 1), datetime(2025, 4, 2, 12)),
            DischargePeriod(datetime(2025, 4, 2, 13), datetime(2025, 4, 3, 23, 59)),
        ]
        readings = period_filter.filter(make_readings(datetime(2025, 4, 1), days=3), periods)
        buckets = CalendarBucketer.bucket_by_day(readings)

        mapping = period_filter.period_index_by_day(buckets, periods)

        assert mapping == {date(2025, 4, 1): 0, date(2025, 4, 3): 1}

    def test_day_partly_outside_periods_left_out(self, period_filter, make_readings):
        periods = [DischargePeriod(datetime(2025, 4, 1, 6), datetime(2025, 4, 2, 23, 59))]
        buckets = CalendarBucketer.bucket_by_day(make_readings(datetime(2025, 4, 1), days=2))

        mapping = period_filter.period_index_by_day(buckets, periods)

        assert mapping == {date(2025, 4, 2): 0}


class TestDateRangeFilter:
    """Test cases for DateRangeFilter."""

    def test_whole_days_inclusive(self, make_readings):
        readings = make_readings(datetime(2025, 4, 1), days=5, interval_minutes=60)

        filtered = DateRangeFilter().filter(readings, date(2025, 4, 2), date(2025, 4, 3))

        assert len(filtered) == 48
        assert filtered[0].timestamp == datetime(2025, 4, 2, 0)
        assert filtered[-1].timestamp == datetime(2025, 4, 3, 23)

    def test_open_bounds(self, make_readings):
        readings = make_readings(datetime(2025, 4, 1), days=3, interval_minutes=60)
        date_filter = DateRangeFilter()

        assert len(date_filter.filter(readings)) == 72
        assert len(date_filter.filter(readings, start_date=date(2025, 4, 3))) == 24
        assert len(date_filter.filter(readings, end_date=date(2025, 4, 1))) == 24

    def test_processor_applies_both_filters(self, make_readings):
        readings = make_readings(datetime(2025, 4, 1), days=3, interval_minutes=60)
        periods = [DischargePeriod(datetime(2025, 4, 1, 12), datetime(2025, 4, 2, 12))]

        filtered = DataProcessor().filter_readings(readings, periods, start_date=date(2025, 4, 2))

        assert [r.timestamp for r in filtered][0] == datetime(2025, 4, 2, 0)
        assert filtered[-1].timestamp == datetime(2025, 4, 2, 12)


class TestDischargeSchedule:
    """Test cases for DischargeSchedule."""

    @pytest.fixture
    def schedule(self):
        """Create schedule builder."""
        return DischargeSchedule()

    def test_continuous(self, schedule):
        assert schedule.continuous() == []
        assert schedule.from_config({"pattern": "continuous"}) == []
        assert schedule.from_config({}) == []

    def test_single(self, schedule):
        periods = schedule.from_config({
            "pattern": "single",
            "start": "2025-04-01T08:00:00",
            "end": "2025-04-10T17:00:00",
        })

        assert len(periods) == 1
        assert periods[0].start == datetime(2025, 4, 1, 8)
        assert periods[0].label == "Discharge Period 1"

    def test_daily(self, schedule):
        periods = schedule.daily(date(2025, 4, 1), date(2025, 4, 3), time(8, 0), time(16, 0))

        assert len(periods) == 3
        assert periods[2].start == datetime(2025, 4, 3, 8)
        assert periods[2].end == datetime(2025, 4, 3, 16)

    def test_daily_overnight(self, schedule):
        periods = schedule.daily(date(2025, 4, 1), date(2025, 4, 1), time(22, 0), time(6, 0))

        assert periods[0].end == datetime(2025, 4, 2, 6)

    def test_custom_sorted_and_labelled(self, schedule):
        periods = schedule.from_config({
            "pattern": "custom",
            "periods": [
                {"start": "2025-04-10T00:00:00", "end": "2025-04-12T00:00:00"},
                {"start": "2025-04-01T00:00:00", "end": "2025-04-03T00:00:00"},
            ],
        })

        assert [p.start.day for p in periods] == [1, 10]
        assert [p.label for p in periods] == ["Discharge Period 1", "Discharge Period 2"]

    def test_custom_requires_periods(self, schedule):
        with pytest.raises(ValueError):
            schedule.from_config({"pattern": "custom", "periods": []})

    def test_missing_key(self, schedule):
        with pytest.raises(ValueError, match="Missing discharge configuration key"):
            schedule.from_config({"pattern": "single", "start": "2025-04-01T08:00:00"})

    def test_unknown_pattern(self, schedule):
        with pytest.raises(ValueError):
            schedule.from_config({"pattern": "weekly"})

    def test_inverted_single_period(self, schedule):
        with pytest.raises(InvalidDischargePeriodError):
            schedule.single(datetime(2025, 4, 2), datetime(2025, 4, 1))


class TestCalendarBucketer:
    """Test cases for CalendarBucketer."""

    def test_bucket_by_day(self, make_readings):
        readings = make_readings(datetime(2025, 4, 1, 12), days=2, interval_minutes=60)

        buckets = CalendarBucketer.bucket_by_day(readings)

        assert sorted(buckets) == [date(2025, 4, 1), date(2025, 4, 2), date(2025, 4, 3)]
        assert len(buckets[date(2025, 4, 1)]) == 12
        assert len(buckets[date(2025, 4, 2)]) == 24
        assert len(buckets[date(2025, 4, 3)]) == 12

    def test_bucket_by_week_uses_sundays(self):
        readings = [
            TemperatureReading(datetime(2025, 4, 5, 23, 59), 1.0),  # Saturday
            TemperatureReading(datetime(2025, 4, 6, 0, 0), 2.0),  # Sunday
            TemperatureReading(datetime(2025, 4, 12, 12, 0), 3.0),  # Saturday
        ]

        buckets = CalendarBucketer.bucket_by_week(readings)

        assert sorted(buckets) == [date(2025, 3, 30), date(2025, 4, 6)]
        assert len(buckets[date(2025, 4, 6)]) == 2
