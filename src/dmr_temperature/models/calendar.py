"""
Calendar data models.

Contains the reporting month type used for DMR assignment.
"""

import re
from dataclasses import dataclass
from datetime import date

_YEAR_MONTH_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


@dataclass(frozen=True, order=True)
class YearMonth:
    """Calendar month of a Discharge Monitoring Report."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Invalid month: {self.month}")

    @classmethod
    def parse(cls, text: str) -> "YearMonth":
        """
        Parse a 'YYYY-MM' string.

        Raises:
            ValueError: If the text is not a valid year and month
        """
        match = _YEAR_MONTH_PATTERN.match(text)
        if not match:
            raise ValueError(f"Invalid month format: {text!r}. Use YYYY-MM")
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def of(cls, day: date) -> "YearMonth":
        """Get the month containing a date."""
        return cls(day.year, day.month)

    def next(self) -> "YearMonth":
        """Get the following month."""
        if self.month == 12:
            return YearMonth(self.year + 1, 1)
        return YearMonth(self.year, self.month + 1)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
