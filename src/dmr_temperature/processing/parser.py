"""
Sensor row parsing module.

Turns raw timestamp and temperature cells into RawRow values. Malformed rows
are expected in sensor exports; they become InvalidRow instead of raising.
"""

import logging
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from ..core import constants
from ..core.date_utils import DateUtils
from ..models import InvalidRow, RawRow, ValidRow
from .converter import UnitConverter

# MM/DD/YYYY HH:MM[:SS] [AM|PM] (two-digit years accepted)
_US_PATTERN = re.compile(
    r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4}|\d{2})\s+"
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"
    r"(?:\s*(?P<meridiem>[AaPp][Mm]))?$"
)

# YYYY-MM-DD[ T]HH:MM[:SS[.ffffff]] with optional Z / ±HH:MM offset
_ISO_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})[T ]"
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,6}))?)?"
    r"\s*(?P<offset>Z|[+-]\d{2}:?\d{2})?$"
)

_SPREADSHEET_EPOCH = datetime(
    constants.SPREADSHEET_EPOCH_YEAR,
    constants.SPREADSHEET_EPOCH_MONTH,
    constants.SPREADSHEET_EPOCH_DAY,
)


class RowParser:
    """Parse sensor rows into timestamp/temperature pairs."""

    def __init__(
        self,
        timezone_str: str = constants.DEFAULT_TIMEZONE,
        temperature_unit: str = "celsius",
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize row parser.

        Args:
            timezone_str: Facility timezone for timestamps that carry an offset
            temperature_unit: Unit of the temperature column
            logger: Logger instance
        """
        self.timezone_str = timezone_str
        self.temperature_unit = temperature_unit
        self.logger = logger or logging.getLogger(__name__)
        self.date_utils = DateUtils(logger)
        self.converter = UnitConverter(logger)

    def parse_row(
        self,
        timestamp_value: Any,
        temperature_value: Any,
        line_number: Optional[int] = None
    ) -> RawRow:
        """
        Parse one sensor row.

        Args:
            timestamp_value: Timestamp text, datetime or spreadsheet serial number
            temperature_value: Temperature text or number
            line_number: Source line number, kept for diagnostics

        Returns:
            ValidRow, or InvalidRow describing why the row was rejected
        """
        try:
            timestamp = self.parse_timestamp(timestamp_value)
        except (ValueError, OverflowError) as e:
            return InvalidRow(reason=f"Invalid timestamp: {e}", line_number=line_number)

        try:
            temperature = self.parse_temperature(temperature_value)
        except ValueError as e:
            return InvalidRow(reason=f"Invalid temperature: {e}", line_number=line_number)

        return ValidRow(timestamp=timestamp, temperature=temperature, line_number=line_number)

    def parse_timestamp(self, value: Any) -> datetime:
        """
        Parse a timestamp into naive facility-local time.

        Raises:
            ValueError: If the value is not a supported timestamp
        """
        if isinstance(value, datetime):
            return self.date_utils.to_facility_local(value, self.timezone_str)

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return self._parse_serial(float(value))

        if not isinstance(value, str):
            raise ValueError(f"unsupported type {type(value).__name__}")

        text = value.strip().strip('"').strip()
        if not text:
            raise ValueError("empty value")

        match = _US_PATTERN.match(text)
        if match:
            return self._from_us_match(match)

        match = _ISO_PATTERN.match(text)
        if match:
            return self._from_iso_match(match)

        raise ValueError(f"unrecognized format {text!r}")

    def parse_temperature(self, value: Any) -> float:
        """
        Parse a temperature and convert it to °C.

        Raises:
            ValueError: If the value is not a finite number
        """
        if isinstance(value, bool) or value is None:
            raise ValueError(f"not a number: {value!r}")

        if isinstance(value, (int, float)):
            temperature = float(value)
        else:
            text = str(value).strip().strip('"').strip()
            temperature = float(text)

        if not math.isfinite(temperature):
            raise ValueError(f"not a finite number: {value!r}")

        if self.temperature_unit.lower() not in ("celsius", "c", "°c"):
            temperature = self.converter.to_celsius(temperature, self.temperature_unit)

        return temperature

    def _from_us_match(self, match: "re.Match") -> datetime:
        year = int(match.group("year"))
        if len(match.group("year")) == 2:
            year += 2000 if year < constants.TWO_DIGIT_YEAR_PIVOT else 1900

        hour = int(match.group("hour"))
        meridiem = match.group("meridiem")
        if meridiem:
            if not 1 <= hour <= 12:
                raise ValueError(f"hour {hour} out of range for {meridiem}")
            if meridiem.upper() == "PM" and hour != 12:
                hour += 12
            elif meridiem.upper() == "AM" and hour == 12:
                hour = 0

        return datetime(
            year,
            int(match.group("month")),
            int(match.group("day")),
            hour,
            int(match.group("minute")),
            int(match.group("second") or 0),
        )

    def _from_iso_match(self, match: "re.Match") -> datetime:
        fraction = match.group("fraction") or "0"
        parsed = datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second") or 0),
            int(fraction.ljust(6, "0")),
        )

        offset = match.group("offset")
        if not offset:
            return parsed

        if offset == "Z":
            tzinfo = timezone.utc
        else:
            digits = offset[1:].replace(":", "")
            delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
            tzinfo = timezone(-delta if offset[0] == "-" else delta)

        return self.date_utils.to_facility_local(parsed.replace(tzinfo=tzinfo), self.timezone_str)

    @staticmethod
    def _parse_serial(value: float) -> datetime:
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"invalid serial date {value!r}")
        # Serial fractions are rounded to the nearest second
        try:
            return _SPREADSHEET_EPOCH + timedelta(seconds=round(value * 86400))
        except OverflowError:
            raise ValueError(f"serial date {value!r} out of range")
