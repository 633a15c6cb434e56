"""
Reading filter module.

Restricts readings to discharge periods and to an operator-selected date
range.
"""

import logging
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..core.date_utils import DateUtils
from ..models import DischargePeriod, TemperatureReading


class DischargePeriodFilter:
    """Keep readings taken while effluent was being discharged."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize discharge period filter.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def filter(
        self,
        readings: Sequence[TemperatureReading],
        periods: Sequence[DischargePeriod]
    ) -> List[TemperatureReading]:
        """
        Filter readings to the union of all discharge periods.

        An empty period list means continuous discharge and keeps every
        reading. Period bounds are inclusive and ordering is preserved.

        Args:
            readings: Readings to filter
            periods: Discharge periods (may overlap)

        Returns:
            Readings inside at least one period
        """
        if not periods:
            self.logger.debug("No discharge periods configured, assuming continuous discharge")
            return list(readings)

        filtered = [
            reading for reading in readings
            if any(period.contains(reading.timestamp) for period in periods)
        ]

        self.logger.info(
            f"Applied {len(periods)} discharge period filter(s): "
            f"{len(filtered)}/{len(readings)} readings kept"
        )
        return filtered

    def period_index_by_day(
        self,
        day_buckets: Dict[date, List[TemperatureReading]],
        periods: Sequence[DischargePeriod]
    ) -> Dict[date, int]:
        """
        Map each day to the discharge period holding all of its readings.

        Days whose readings are split across periods, or lie partly outside
        every period, are left out so windows containing them are void. With
        overlapping periods the first period holding the whole day wins.

        Args:
            day_buckets: Readings grouped by calendar day
            periods: Discharge periods, ordered by start

        Returns:
            Dictionary mapping day to period index
        """
        mapping: Dict[date, int] = {}
        split_days = 0
        for day, day_readings in day_buckets.items():
            if not day_readings:
                continue
            for index, period in enumerate(periods):
                if all(period.contains(reading.timestamp) for reading in day_readings):
                    mapping[day] = index
                    break
            else:
                split_days += 1

        if split_days:
            self.logger.debug(f"{split_days} day(s) not inside a single discharge period")
        return mapping


class DateRangeFilter:
    """Keep readings between two calendar days (inclusive)."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date range filter.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def filter(
        self,
        readings: Sequence[TemperatureReading],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> List[TemperatureReading]:
        """
        Filter readings to whole days from start_date through end_date.

        Args:
            readings: Readings to filter
            start_date: First day kept (00:00:00), or None for no lower bound
            end_date: Last day kept (through 23:59:59.999999), or None for no upper bound

        Returns:
            Readings inside the range, in original order
        """
        if start_date is None and end_date is None:
            return list(readings)

        lower = DateUtils.day_bounds(start_date)[0] if start_date else None
        upper = DateUtils.day_bounds(end_date)[1] if end_date else None

        filtered = [
            reading for reading in readings
            if (lower is None or reading.timestamp >= lower)
            and (upper is None or reading.timestamp <= upper)
        ]

        self.logger.info(
            f"Date range {start_date or '-'} to {end_date or '-'}: "
            f"{len(filtered)}/{len(readings)} readings kept"
        )
        return filtered
