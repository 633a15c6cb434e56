"""
Result projection module.

Selects the weeks reported in a DMR month, derives the reportable MWAT and
DDMAX values, and exposes the tabular views shown to operators.
"""

from typing import Any, Dict, List, Optional, Sequence

from ..core import constants
from ..models import (
    ComplianceReport,
    DailyMaximumResult,
    MergeStatistics,
    MwatBasis,
    WeeklyComplianceResult,
    YearMonth,
)


def project(
    weekly_results: Sequence[WeeklyComplianceResult],
    analysis_month: Optional[YearMonth],
    daily_maximums: Sequence[DailyMaximumResult] = (),
    total_readings: int = 0,
    date_range: str = "",
    mwat_basis: MwatBasis = MwatBasis.DAILY_MEAN,
    merge_statistics: Optional[MergeStatistics] = None
) -> ComplianceReport:
    """
    Build the compliance report for an analysis month.

    Weeks are kept when their DMR month equals analysis_month; without an
    analysis month every week is kept. With no qualifying week the overall
    values are 0.0 and report.no_qualifying_weeks is set, so callers must
    not present them as measurements.

    Args:
        weekly_results: All weekly results of the calculation
        analysis_month: Reporting month, or None for all weeks
        daily_maximums: Daily Maximum results of the calculation
        total_readings: Number of readings used
        date_range: Display string of the reading date range
        mwat_basis: Daily statistic MWAT was computed from
        merge_statistics: Diagnostics of the source merge

    Returns:
        Compliance report
    """
    if analysis_month is None:
        qualifying = list(weekly_results)
    else:
        qualifying = [week for week in weekly_results if week.dmr_month == analysis_month]

    overall_mwat = max((week.mwat for week in qualifying), default=0.0)
    overall_ddmax = max((week.ddmax for week in qualifying), default=0.0)

    if analysis_month is None:
        reported_days = list(daily_maximums)
    else:
        covered = {day for week in qualifying for day in week.days}
        reported_days = [result for result in daily_maximums if result.date in covered]

    return ComplianceReport(
        overall_mwat=overall_mwat,
        overall_ddmax=overall_ddmax,
        weekly_results=qualifying,
        all_weekly_results=list(weekly_results),
        daily_maximums=reported_days,
        analysis_month=analysis_month,
        total_readings=total_readings,
        date_range=date_range,
        mwat_basis=mwat_basis,
        merge_statistics=merge_statistics,
    )


def top_weekly_periods(report: ComplianceReport, n: int = constants.DEFAULT_TOP_N) -> List[Dict[str, Any]]:
    """Top-N weekly periods, highest weekly average first."""
    ranked = sorted(report.weekly_results, key=lambda week: week.mwat, reverse=True)
    return [
        {
            "period_end_date": week.week_end,
            "period_start_date": week.week_start,
            "weekly_average": week.mwat,
        }
        for week in ranked[:n]
    ]


def top_daily_maximums(report: ComplianceReport, n: int = constants.DEFAULT_TOP_N) -> List[Dict[str, Any]]:
    """Top-N daily maximums, hottest first."""
    ranked = sorted(report.daily_maximums, key=lambda day: day.temperature, reverse=True)
    return [
        {
            "date": day.date,
            "time_range": day.time_range,
            "temperature": day.temperature,
            "reading_count": day.window_reading_count,
        }
        for day in ranked[:n]
    ]


def summarize(report: ComplianceReport) -> Dict[str, Any]:
    """Summary scalars of a report."""
    return {
        "overall_mwat": report.overall_mwat,
        "overall_ddmax": report.overall_ddmax,
        "total_readings": report.total_readings,
        "date_range": report.date_range,
        "analysis_month": str(report.analysis_month) if report.analysis_month else None,
        "weeks": len(report.weekly_results),
        "no_qualifying_weeks": report.no_qualifying_weeks,
    }
