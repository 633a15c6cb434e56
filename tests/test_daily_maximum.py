"""
Tests for the Daily Maximum (2-hour rolling average) calculation.
"""

import math
import time
from datetime import date, datetime, timedelta

import pytest

from src.dmr_temperature.algorithms import DailyMaximumCalculator
from src.dmr_temperature.models import TemperatureReading


def brute_force_daily_maximums(readings, window=timedelta(hours=2), min_readings=2):
    """Reference implementation: evaluate every anchor against every reading."""
    best = {}
    for anchor in readings:
        members = [
            r.temperature for r in readings
            if anchor.timestamp <= r.timestamp <= anchor.timestamp + window
        ]
        if len(members) < min_readings:
            continue
        average = sum(members) / len(members)
        day = anchor.timestamp.date()
        if day not in best or average > best[day]:
            best[day] = average
    return best


class TestDailyMaximumCalculator:
    """Test cases for DailyMaximumCalculator."""

    @pytest.fixture
    def calculator(self):
        """Create calculator instance."""
        return DailyMaximumCalculator()

    def test_constant_temperature(self, calculator, make_readings):
        results = calculator.calculate(make_readings(datetime(2025, 4, 1), days=3))

        assert [r.date for r in results] == [date(2025, 4, 1), date(2025, 4, 2), date(2025, 4, 3)]
        for result in results:
            assert result.temperature == pytest.approx(20.0)
            # [00:00, 02:00] holds nine 15-minute readings
            assert result.window_reading_count == 9
            assert result.time_range == "00:00:00 - 02:00:00"

    def test_matches_brute_force(self, calculator, make_readings):
        def temperature(ts):
            hours = ts.hour + ts.minute / 60
            return 18.0 + 4.0 * math.sin(hours / 24 * 2 * math.pi) + (ts.day % 3) * 0.7

        readings = make_readings(datetime(2025, 6, 1), days=4, interval_minutes=20, temperature=temperature)
        # Irregular gaps
        readings = [r for index, r in enumerate(readings) if index % 7 != 3]

        results = calculator.calculate(readings)
        expected = brute_force_daily_maximums(readings)

        assert {r.date for r in results} == set(expected)
        for result in results:
            assert result.temperature == pytest.approx(expected[result.date])

    def test_peak_window_found(self, calculator, make_readings):
        def temperature(ts):
            if ts.hour < 14:
                return 10.0
            return 25.0 if ts.hour < 16 else 15.0

        results = calculator.calculate(
            make_readings(datetime(2025, 7, 1), days=1, temperature=temperature)
        )

        assert len(results) == 1
        # Best window [14:00, 16:00] holds eight 25 °C readings and one 15 °C reading
        assert results[0].temperature == pytest.approx((8 * 25.0 + 15.0) / 9)
        assert results[0].time_range == "14:00:00 - 16:00:00"
        assert results[0].window_start == datetime(2025, 7, 1, 14)
        assert results[0].window_end == datetime(2025, 7, 1, 16)

    def test_windows_with_one_reading_skipped(self, calculator):
        readings = [
            TemperatureReading(datetime(2025, 4, 1, 6), 20.0),
            TemperatureReading(datetime(2025, 4, 1, 9), 22.0),
            TemperatureReading(datetime(2025, 4, 2, 6), 20.0),
            TemperatureReading(datetime(2025, 4, 2, 7), 24.0),
        ]

        results = calculator.calculate(readings)

        assert [r.date for r in results] == [date(2025, 4, 2)]
        assert results[0].temperature == pytest.approx(22.0)
        assert results[0].window_reading_count == 2

    def test_window_crosses_midnight(self, calculator):
        readings = [
            TemperatureReading(datetime(2025, 4, 1, 10), 10.0),
            TemperatureReading(datetime(2025, 4, 1, 11), 10.0),
            TemperatureReading(datetime(2025, 4, 1, 23), 30.0),
            TemperatureReading(datetime(2025, 4, 2, 0, 30), 30.0),
        ]

        results = calculator.calculate(readings)

        # The window anchored at 23:00 belongs to April 1
        assert results[0].date == date(2025, 4, 1)
        assert results[0].temperature == pytest.approx(30.0)
        assert results[0].time_range == "23:00:00 - 00:30:00"
        # The 00:30 anchor has no partner, so April 2 has no result
        assert len(results) == 1

    def test_tie_keeps_earliest_window(self, calculator):
        readings = [
            TemperatureReading(datetime(2025, 4, 1, 8, 0), 25.0),
            TemperatureReading(datetime(2025, 4, 1, 8, 15), 25.0),
            TemperatureReading(datetime(2025, 4, 1, 14, 0), 25.0),
            TemperatureReading(datetime(2025, 4, 1, 14, 15), 25.0),
        ]

        results = calculator.calculate(readings)

        assert results[0].time_range == "08:00:00 - 08:15:00"

    def test_unsorted_input(self, calculator, make_readings):
        readings = make_readings(datetime(2025, 4, 1), days=1)

        assert calculator.calculate(list(reversed(readings))) == calculator.calculate(readings)

    def test_empty_input(self, calculator):
        assert calculator.calculate([]) == []

    def test_results_sorted_by_date(self, calculator, make_readings):
        later = make_readings(datetime(2025, 4, 5), days=1)
        earlier = make_readings(datetime(2025, 4, 1), days=1)

        results = calculator.calculate(later + earlier)

        assert [r.date for r in results] == [date(2025, 4, 1), date(2025, 4, 5)]

    def test_long_record_completes_quickly(self, calculator, make_readings):
        # 521 days at 15-minute spacing is just over 50,000 readings
        readings = make_readings(
            datetime(2024, 1, 1), days=521,
            temperature=lambda ts: 15.0 + 5.0 * math.sin(2 * math.pi * (ts.hour * 60 + ts.minute) / 1440)
        )
        assert len(readings) > 50000

        started = time.perf_counter()
        results = calculator.calculate(readings)
        elapsed = time.perf_counter() - started

        assert len(results) == 521
        assert all(r.window_reading_count == 9 for r in results)
        assert elapsed < 10.0
