"""
Calendar bucketing module.

Groups readings by calendar day and by Sunday-start week. Timestamps are
already facility-local, so no timezone conversion happens here.
"""

from datetime import date
from typing import Dict, List, Sequence

from ..core.date_utils import DateUtils
from ..models import TemperatureReading


class CalendarBucketer:
    """Group readings into calendar buckets."""

    @staticmethod
    def bucket_by_day(readings: Sequence[TemperatureReading]) -> Dict[date, List[TemperatureReading]]:
        """
        Group readings by calendar day.

        Args:
            readings: Readings to group

        Returns:
            Dictionary mapping each day with data to its readings
        """
        buckets: Dict[date, List[TemperatureReading]] = {}
        for reading in readings:
            buckets.setdefault(reading.timestamp.date(), []).append(reading)
        return buckets

    @staticmethod
    def bucket_by_week(readings: Sequence[TemperatureReading]) -> Dict[date, List[TemperatureReading]]:
        """
        Group readings by the Sunday starting their week.

        Args:
            readings: Readings to group

        Returns:
            Dictionary mapping each week start (a Sunday) to its readings
        """
        buckets: Dict[date, List[TemperatureReading]] = {}
        for reading in readings:
            week_key = DateUtils.week_start(reading.timestamp.date())
            buckets.setdefault(week_key, []).append(reading)
        return buckets
