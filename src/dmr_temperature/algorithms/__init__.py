"""
Calculation algorithms for DMR temperature compliance.

Provides the Daily Maximum, weekly average (MWAT), Wednesday-rule month
assignment and report projection steps, and the pipeline that chains them.
"""

from .daily_maximum import DailyMaximumCalculator
from .weekly_average import WeeklyAverageCalculator
from .dmr import assign_dmr_month
from .projection import project, top_weekly_periods, top_daily_maximums, summarize
from .compliance import ComplianceCalculator, calculate

__all__ = [
    "DailyMaximumCalculator",
    "WeeklyAverageCalculator",
    "assign_dmr_month",
    "project",
    "top_weekly_periods",
    "top_daily_maximums",
    "summarize",
    "ComplianceCalculator",
    "calculate",
]
