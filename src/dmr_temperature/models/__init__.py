"""
Data models for the DMR temperature compliance system.

Contains DTOs for readings, discharge periods, calendar months and results.
"""

from .reading import TemperatureReading, ValidRow, InvalidRow, RawRow, MergeStatistics
from .calendar import YearMonth
from .discharge import DischargePattern, DischargePeriod
from .results import (
    MwatBasis,
    WeekAlignment,
    CalculationInput,
    DailyMaximumResult,
    DailyValue,
    WeeklyComplianceResult,
    ComplianceReport,
)

__all__ = [
    "TemperatureReading",
    "ValidRow",
    "InvalidRow",
    "RawRow",
    "MergeStatistics",
    "YearMonth",
    "DischargePattern",
    "DischargePeriod",
    "MwatBasis",
    "WeekAlignment",
    "CalculationInput",
    "DailyMaximumResult",
    "DailyValue",
    "WeeklyComplianceResult",
    "ComplianceReport",
]
