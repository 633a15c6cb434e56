"""
Core utilities for the DMR temperature compliance system.

Provides configuration management, logging, date handling and exceptions.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .exceptions import (
    CalculationError,
    EmptyDatasetError,
    NoDataInRangeError,
    InvalidDischargePeriodError,
)

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "CalculationError",
    "EmptyDatasetError",
    "NoDataInRangeError",
    "InvalidDischargePeriodError",
]
