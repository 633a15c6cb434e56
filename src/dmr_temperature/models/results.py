"""
Compliance calculation data models.

Contains the calculation input bundle and the daily, weekly and report-level
results produced by the calculation pipeline.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Tuple

from ..core import constants
from .calendar import YearMonth
from .discharge import DischargePeriod
from .reading import MergeStatistics, TemperatureReading


class MwatBasis(str, Enum):
    """Daily statistic averaged over seven days to obtain MWAT."""

    DAILY_MEAN = "daily_mean"
    DAILY_MAXIMUM = "daily_maximum"


class WeekAlignment(str, Enum):
    """Which seven-day windows are evaluated."""

    ROLLING = "rolling"  # every window of seven consecutive days
    CALENDAR = "calendar"  # Sunday-start weeks only


@dataclass(frozen=True)
class CalculationInput:
    """Everything a single compliance calculation depends on."""

    readings: Tuple[TemperatureReading, ...]
    discharge_periods: Tuple[DischargePeriod, ...] = ()
    analysis_month: Optional[YearMonth] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    mwat_basis: MwatBasis = MwatBasis.DAILY_MEAN
    week_alignment: WeekAlignment = WeekAlignment.ROLLING
    restrict_weeks_to_discharge_period: bool = False
    reading_interval_minutes: float = constants.DEFAULT_READING_INTERVAL_MINUTES
    merge_statistics: Optional[MergeStatistics] = None

    def __post_init__(self):
        # Accept any sequence but store tuples so the input stays immutable
        object.__setattr__(self, "readings", tuple(self.readings))
        object.__setattr__(self, "discharge_periods", tuple(self.discharge_periods))
        object.__setattr__(self, "mwat_basis", MwatBasis(self.mwat_basis))
        object.__setattr__(self, "week_alignment", WeekAlignment(self.week_alignment))


@dataclass(frozen=True)
class DailyMaximumResult:
    """Highest 2-hour rolling average anchored within one calendar day."""

    date: date
    temperature: float  # °C
    window_reading_count: int
    time_range: str
    window_start: Optional[datetime] = None
    window_end: Optional[datetime] = None


@dataclass(frozen=True)
class DailyValue:
    """One point of the daily series averaged into MWAT."""

    date: date
    value: float  # °C
    reading_count: int = 0


@dataclass(frozen=True)
class WeeklyComplianceResult:
    """MWAT and DDMAX for one window of seven consecutive days."""

    week_start: date
    week_end: date
    daily_maximums: List[Tuple[date, float]]
    daily_values: List[float]
    mwat: float
    ddmax: float
    dmr_month: YearMonth
    discharge_hours: float = 0.0
    discharge_period_index: Optional[int] = None

    @property
    def days(self) -> List[date]:
        return [day for day, _ in self.daily_maximums]


@dataclass
class ComplianceReport:
    """Reportable DMR values for one calculation."""

    overall_mwat: float
    overall_ddmax: float
    weekly_results: List[WeeklyComplianceResult] = field(default_factory=list)
    all_weekly_results: List[WeeklyComplianceResult] = field(default_factory=list)
    daily_maximums: List[DailyMaximumResult] = field(default_factory=list)
    analysis_month: Optional[YearMonth] = None
    total_readings: int = 0
    date_range: str = ""
    mwat_basis: MwatBasis = MwatBasis.DAILY_MEAN
    merge_statistics: Optional[MergeStatistics] = None

    @property
    def has_qualifying_weeks(self) -> bool:
        return bool(self.weekly_results)

    @property
    def no_qualifying_weeks(self) -> bool:
        """True when the overall values are placeholders, not measurements."""
        return not self.weekly_results
