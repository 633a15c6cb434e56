"""
Weekly Average (MWAT) calculation module.

MWAT is the largest mean of daily temperatures over 7 consecutive days. Every
seven-day slide over the daily series is evaluated; a slide with a missing
day is void rather than interpolated.
"""

import logging
import math
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from ..core import constants
from ..core.date_utils import DateUtils
from ..models import DailyMaximumResult, DailyValue, WeeklyComplianceResult
from .dmr import assign_dmr_month


class WeeklyAverageCalculator:
    """Calculate 7-consecutive-day averages from a daily series."""

    def __init__(
        self,
        window_days: int = constants.WEEK_LENGTH_DAYS,
        reading_interval_minutes: float = constants.DEFAULT_READING_INTERVAL_MINUTES,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize weekly average calculator.

        Args:
            window_days: Window length in days
            reading_interval_minutes: Nominal sensor interval, used for discharge hours
            logger: Logger instance
        """
        self.window_days = window_days
        self.reading_interval_minutes = reading_interval_minutes
        self.logger = logger or logging.getLogger(__name__)

    def calculate(
        self,
        daily_series: Sequence[DailyValue],
        daily_maximums: Optional[Sequence[DailyMaximumResult]] = None,
        day_periods: Optional[Dict[date, int]] = None,
        week_starts: Optional[Iterable[date]] = None
    ) -> List[WeeklyComplianceResult]:
        """
        Calculate weekly results for every valid seven-day window.

        Args:
            daily_series: Daily values averaged into MWAT
            daily_maximums: Daily Maximum results used for DDMAX. When omitted
                            the daily series values are used.
            day_periods: Optional day -> discharge period index. When given,
                         all days of a window must share one period.
            week_starts: Optional allowed window start days (calendar weeks)

        Returns:
            One result per valid window, ordered by window end date
        """
        series = sorted(daily_series, key=lambda point: point.date)
        if daily_maximums is None:
            maximum_by_day = {point.date: point.value for point in series}
        else:
            maximum_by_day = {result.date: result.temperature for result in daily_maximums}
        allowed_starts = set(week_starts) if week_starts is not None else None

        results: List[WeeklyComplianceResult] = []
        skipped_gaps = 0
        skipped_periods = 0
        skipped_no_maximum = 0

        for start_index in range(len(series) - self.window_days + 1):
            window = series[start_index:start_index + self.window_days]
            week_start = window[0].date

            if allowed_starts is not None and week_start not in allowed_starts:
                continue

            if not self._is_consecutive(window):
                skipped_gaps += 1
                continue

            period_index = None
            if day_periods is not None:
                indices = {day_periods.get(point.date) for point in window}
                if len(indices) != 1 or None in indices:
                    skipped_periods += 1
                    continue
                period_index = indices.pop()

            maximums = [
                (point.date, maximum_by_day[point.date])
                for point in window if point.date in maximum_by_day
            ]
            if not maximums:
                skipped_no_maximum += 1
                continue

            values = [point.value for point in window]
            reading_count = sum(point.reading_count for point in window)

            results.append(
                WeeklyComplianceResult(
                    week_start=week_start,
                    week_end=window[-1].date,
                    daily_maximums=maximums,
                    daily_values=values,
                    mwat=math.fsum(values) / len(values),
                    ddmax=max(maximum for _, maximum in maximums),
                    dmr_month=assign_dmr_month(week_start),
                    discharge_hours=reading_count * self.reading_interval_minutes / 60,
                    discharge_period_index=period_index,
                )
            )

        self.logger.debug(
            f"Skipped windows: {skipped_gaps} with missing days, "
            f"{skipped_periods} crossing discharge periods, "
            f"{skipped_no_maximum} without a daily maximum"
        )
        self.logger.info(f"Calculated {len(results)} weekly averages")
        return results

    @staticmethod
    def _is_consecutive(window: Sequence[DailyValue]) -> bool:
        return all(
            DateUtils.is_next_day(previous.date, current.date)
            for previous, current in zip(window, window[1:])
        )
