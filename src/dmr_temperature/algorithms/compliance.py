"""
Compliance calculator facade.

Runs the full MWAT/DDMAX pipeline for one CalculationInput:

    date range filter -> discharge period filter -> day buckets
    -> daily maximums -> daily series -> weekly averages -> DMR projection

calculate() is a pure function of its input; nothing is kept between calls.
"""

import logging
import math
from typing import Dict, List, Optional

from ..core.date_utils import DateUtils
from ..core.exceptions import NoDataInRangeError
from ..models import (
    CalculationInput,
    ComplianceReport,
    DailyMaximumResult,
    DailyValue,
    MwatBasis,
    TemperatureReading,
    WeekAlignment,
)
from ..processing import CalendarBucketer, DateRangeFilter, DischargePeriodFilter
from .daily_maximum import DailyMaximumCalculator
from .projection import project
from .weekly_average import WeeklyAverageCalculator


def calculate(
    calculation_input: CalculationInput,
    logger: Optional[logging.Logger] = None
) -> ComplianceReport:
    """
    Calculate the compliance report for one set of readings and parameters.

    Args:
        calculation_input: Readings and calculation parameters
        logger: Logger instance

    Returns:
        Compliance report

    Raises:
        NoDataInRangeError: If no reading survives date range and discharge filtering
    """
    logger = logger or logging.getLogger(__name__)

    in_range = DateRangeFilter(logger).filter(
        calculation_input.readings,
        calculation_input.start_date,
        calculation_input.end_date,
    )
    discharge_filter = DischargePeriodFilter(logger)
    filtered = discharge_filter.filter(in_range, calculation_input.discharge_periods)

    if not filtered:
        raise NoDataInRangeError()

    day_buckets = CalendarBucketer.bucket_by_day(filtered)
    daily_maximums = DailyMaximumCalculator(logger=logger).calculate(filtered)
    daily_series = _daily_series(day_buckets, daily_maximums, calculation_input.mwat_basis)

    day_periods = None
    if calculation_input.restrict_weeks_to_discharge_period and calculation_input.discharge_periods:
        day_periods = discharge_filter.period_index_by_day(
            day_buckets, calculation_input.discharge_periods
        )

    week_starts = None
    if calculation_input.week_alignment == WeekAlignment.CALENDAR:
        week_starts = CalendarBucketer.bucket_by_week(filtered).keys()

    weekly_results = WeeklyAverageCalculator(
        reading_interval_minutes=calculation_input.reading_interval_minutes,
        logger=logger,
    ).calculate(daily_series, daily_maximums, day_periods, week_starts)

    first = min(reading.timestamp for reading in filtered)
    last = max(reading.timestamp for reading in filtered)

    return project(
        weekly_results,
        calculation_input.analysis_month,
        daily_maximums=daily_maximums,
        total_readings=len(filtered),
        date_range=DateUtils.format_date_range(first, last),
        mwat_basis=calculation_input.mwat_basis,
        merge_statistics=calculation_input.merge_statistics,
    )


def _daily_series(
    day_buckets: Dict,
    daily_maximums: List[DailyMaximumResult],
    basis: MwatBasis
) -> List[DailyValue]:
    if basis == MwatBasis.DAILY_MAXIMUM:
        return [
            DailyValue(result.date, result.temperature, len(day_buckets.get(result.date, [])))
            for result in daily_maximums
        ]
    return [
        DailyValue(day, _mean(readings), len(readings))
        for day, readings in sorted(day_buckets.items())
    ]


def _mean(readings: List[TemperatureReading]) -> float:
    return math.fsum(reading.temperature for reading in readings) / len(readings)


class ComplianceCalculator:
    """
    High-level calculator for MWAT/DDMAX compliance.

    Wraps calculate() with the logging used by the application.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize compliance calculator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def calculate(self, calculation_input: CalculationInput) -> ComplianceReport:
        """Run the calculation and log the reportable values."""
        self.logger.debug(
            f"Calculating compliance: {len(calculation_input.readings)} readings, "
            f"{len(calculation_input.discharge_periods)} discharge periods, "
            f"basis={calculation_input.mwat_basis.value}, "
            f"alignment={calculation_input.week_alignment.value}"
        )

        report = calculate(calculation_input, self.logger)

        month = report.analysis_month or "all months"
        if report.no_qualifying_weeks:
            self.logger.warning(f"No qualifying weeks for {month}")
        else:
            self.logger.info(
                f"{month}: MWAT {report.overall_mwat:.3f} °C, DDMAX {report.overall_ddmax:.3f} °C "
                f"over {len(report.weekly_results)} weeks"
            )

        return report
