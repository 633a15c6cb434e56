"""
Date and timezone utilities.

Centralizes calendar arithmetic and facility-local time handling.
Calculations work on naive datetimes that are already in the facility's local
time; aware timestamps are converted once, at ingestion.
"""

import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Optional, Tuple
import pytz
from pytz.tzinfo import BaseTzInfo


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'America/Denver', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    def to_facility_local(self, dt: datetime, timezone_str: str) -> datetime:
        """
        Convert a timestamp to naive facility-local time.

        Naive timestamps are assumed to be local already and are returned
        unchanged. Aware timestamps are converted to the facility timezone and
        stripped of their tzinfo.

        Args:
            dt: Datetime (naive or aware)
            timezone_str: Facility timezone string

        Returns:
            Naive datetime in facility-local time
        """
        if dt.tzinfo is None:
            return dt

        tz = self.parse_timezone(timezone_str)
        local_time = dt.astimezone(tz)

        self.logger.debug(
            f"Converted {dt.isoformat()} -> {local_time.isoformat()} ({timezone_str})"
        )

        return local_time.replace(tzinfo=None)

    @staticmethod
    def week_start(day: date) -> date:
        """
        Get the Sunday on or before a date.

        Args:
            day: Calendar date

        Returns:
            Sunday starting the week that contains the date
        """
        # date.weekday() is Monday=0; shift so Sunday=0
        days_since_sunday = (day.weekday() + 1) % 7
        return day - timedelta(days=days_since_sunday)

    @staticmethod
    def last_day_of_month(year: int, month: int) -> int:
        """Get the last calendar day number of a month."""
        return calendar.monthrange(year, month)[1]

    @staticmethod
    def day_bounds(day: date) -> Tuple[datetime, datetime]:
        """
        Get the first and last instant of a calendar day.

        Args:
            day: Calendar date

        Returns:
            Tuple of (00:00:00, 23:59:59.999999) naive datetimes
        """
        return (
            datetime.combine(day, datetime.min.time()),
            datetime.combine(day, datetime.max.time()),
        )

    @staticmethod
    def is_next_day(previous: date, current: date) -> bool:
        """Check that two dates are exactly one calendar day apart."""
        return (current - previous).days == 1

    @staticmethod
    def format_date_range(start: Optional[datetime], end: Optional[datetime]) -> str:
        """
        Render a reading date range for display.

        Args:
            start: First timestamp
            end: Last timestamp

        Returns:
            'YYYY-MM-DD to YYYY-MM-DD', or an empty string without data
        """
        if start is None or end is None:
            return ""
        return f"{start.date().isoformat()} to {end.date().isoformat()}"
