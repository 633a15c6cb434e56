"""
Exceptions raised by the compliance calculation pipeline.

Malformed rows and windows without enough readings are not errors; they are
dropped or skipped where they occur. The exceptions below abort a calculation
and are meant to be reported to the operator.
"""


class CalculationError(ValueError):
    """Base class for errors that abort a compliance calculation."""


class EmptyDatasetError(CalculationError):
    """No reading could be parsed from any sensor source."""

    def __init__(self, message: str = "No valid temperature readings found in any source"):
        super().__init__(message)


class NoDataInRangeError(CalculationError):
    """Date range or discharge period filtering left no readings."""

    def __init__(
        self,
        message: str = "No data found in the specified date range or discharge periods"
    ):
        super().__init__(message)


class InvalidDischargePeriodError(CalculationError):
    """A discharge period does not end after it starts."""
