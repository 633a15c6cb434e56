"""
Application-wide constants for DMR temperature compliance calculations.

This module defines default values and regulatory constants used throughout
the application.
"""

# Daily Maximum (DDMAX) rolling window
ROLLING_WINDOW_HOURS = 2
MIN_WINDOW_READINGS = 2  # Windows with fewer readings are skipped

# Weekly Average (MWAT) window
WEEK_LENGTH_DAYS = 7

# Wednesday rule for DMR month assignment
WEDNESDAY_OFFSET_DAYS = 3  # Sunday + 3 days
DMR_MONTH_END_MARGIN_DAYS = 2  # Wednesday after (last day - 2) goes to next month

# Sensor sampling
DEFAULT_READING_INTERVAL_MINUTES = 15

# Spreadsheet serial dates count days from 1899-12-30
SPREADSHEET_EPOCH_YEAR = 1899
SPREADSHEET_EPOCH_MONTH = 12
SPREADSHEET_EPOCH_DAY = 30

# Two-digit years below this pivot are read as 20xx, otherwise 19xx
TWO_DIGIT_YEAR_PIVOT = 50

# Sensor file layout (title row + column header row)
DEFAULT_HEADER_ROWS = 2
DEFAULT_TIMESTAMP_COLUMN = 1
DEFAULT_TEMPERATURE_COLUMN = 2

# Report output
EXPORT_DECIMALS = 3
DEFAULT_TOP_N = 10
DEFAULT_TIMEZONE = "UTC"
NO_QUALIFYING_WEEKS_TEXT = "N/A (no qualifying weeks)"
