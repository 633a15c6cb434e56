"""
DMR month assignment (Wednesday rule).

A weekly window belongs to the reporting month of its Wednesday (start + 3
days), except that a Wednesday falling after the second-to-last day of its
month moves the week to the following month.
"""

from datetime import date, timedelta

from ..core import constants
from ..core.date_utils import DateUtils
from ..models import YearMonth


def assign_dmr_month(week_start: date) -> YearMonth:
    """
    Assign a weekly window to its Discharge Monitoring Report month.

    Args:
        week_start: First day of the seven-day window

    Returns:
        Reporting month of the window

    Example:
        >>> assign_dmr_month(date(2025, 6, 22))  # Wednesday June 25
        YearMonth(year=2025, month=6)
        >>> assign_dmr_month(date(2025, 7, 27))  # Wednesday July 30
        YearMonth(year=2025, month=8)
    """
    wednesday = week_start + timedelta(days=constants.WEDNESDAY_OFFSET_DAYS)
    month = YearMonth.of(wednesday)
    last_day = DateUtils.last_day_of_month(month.year, month.month)

    if wednesday.day > last_day - constants.DMR_MONTH_END_MARGIN_DAYS:
        return month.next()
    return month
