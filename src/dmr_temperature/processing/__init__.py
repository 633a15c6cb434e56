"""
Data processing module for the DMR temperature compliance system.

Provides row parsing, multi-sensor merging, filtering, discharge schedules
and calendar bucketing of temperature readings.
"""

import logging
from datetime import date
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..core import constants
from ..models import DischargePeriod, MergeStatistics, RawRow, TemperatureReading
from .bucketing import CalendarBucketer
from .converter import UnitConverter
from .filters import DateRangeFilter, DischargePeriodFilter
from .merger import ReadingMerger
from .parser import RowParser
from .schedule import DischargeSchedule


class DataProcessor:
    """
    Unified data processor combining parsing, merging and filtering.

    This class provides a convenient interface to all processing operations.
    """

    def __init__(
        self,
        timezone_str: str = constants.DEFAULT_TIMEZONE,
        temperature_unit: str = "celsius",
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize data processor.

        Args:
            timezone_str: Facility timezone
            temperature_unit: Unit of the sensor temperature columns
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.parser = RowParser(timezone_str, temperature_unit, logger)
        self.merger = ReadingMerger(logger)
        self.discharge_filter = DischargePeriodFilter(logger)
        self.date_range_filter = DateRangeFilter(logger)

    def parse_rows(self, rows: Iterable[Tuple[Any, Any]]) -> List[RawRow]:
        """
        Parse (timestamp, temperature) cell pairs of one source.

        Args:
            rows: Raw cell pairs

        Returns:
            Parsed rows, including invalid ones
        """
        return [
            self.parser.parse_row(timestamp, temperature, line_number=index + 1)
            for index, (timestamp, temperature) in enumerate(rows)
        ]

    def merge_sources(
        self,
        sources: Sequence[Iterable[RawRow]]
    ) -> Tuple[List[TemperatureReading], MergeStatistics]:
        """
        Merge parsed sources into one chronological reading sequence.

        Raises:
            EmptyDatasetError: If no source has a valid row
        """
        return self.merger.merge(sources)

    def filter_readings(
        self,
        readings: Sequence[TemperatureReading],
        periods: Sequence[DischargePeriod] = (),
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> List[TemperatureReading]:
        """
        Apply the date range and discharge period filters.

        Returns:
            Readings inside the date range and inside any discharge period
        """
        in_range = self.date_range_filter.filter(readings, start_date, end_date)
        return self.discharge_filter.filter(in_range, periods)


__all__ = [
    "CalendarBucketer",
    "DataProcessor",
    "DateRangeFilter",
    "DischargePeriodFilter",
    "DischargeSchedule",
    "ReadingMerger",
    "RowParser",
    "UnitConverter",
]
