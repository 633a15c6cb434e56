"""
Logging setup for the DMR temperature compliance system.

The console carries the operator-facing progress of a calculation; the log
file keeps the per-window diagnostics (skipped windows, dropped rows) that
support a DMR submission if it is questioned later.
"""

import logging
import os
import time
from pathlib import Path
from typing import Optional, Union

from .exceptions import CalculationError

DEFAULT_LOG_FILE = "logs/dmr_temperature.log"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_log_level(level: Union[str, int]) -> int:
    """
    Resolve a level name ('info', 'DEBUG', ...) or number to a logging level.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level} (expected one of {', '.join(LOG_LEVELS)})")
    return getattr(logging, name)


def setup_logger(
    name: str = "dmr_temperature",
    log_file: Optional[str] = None,
    log_level: Union[str, int] = "INFO",
    file_level: Union[str, int] = "DEBUG"
) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        name: Logger name
        log_file: Log file path. If None, uses LOG_FILE env var or logs/dmr_temperature.log
        log_level: Console level
        file_level: Log file level

    Returns:
        Configured logger instance

    Raises:
        ValueError: If a level name is invalid
    """
    console_level = parse_log_level(log_level)
    file_level = parse_log_level(file_level)
    log_path = Path(log_file or os.getenv("LOG_FILE", DEFAULT_LOG_FILE))
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    # The logger must pass the more verbose of the two handler levels
    logger.setLevel(min(console_level, file_level))

    # Reconfiguring replaces the previous handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)

    logger.propagate = False
    logger.debug(
        f"Logging to console at {logging.getLevelName(console_level)}, "
        f"to {log_path} at {logging.getLevelName(file_level)}"
    )

    return logger


class LoggerContext:
    """
    Log the start, duration and outcome of a pipeline step.

    Calculation errors (no data, empty sensor files) are expected operator
    mistakes and are logged as warnings without a traceback; anything else is
    logged as an error with the traceback. Exceptions always propagate.
    """

    def __init__(self, logger: logging.Logger, operation: str):
        """
        Initialize logger context.

        Args:
            logger: Logger instance
            operation: Name of the step being logged
        """
        self.logger = logger
        self.operation = operation
        self.started = None
        self.duration = None

    def __enter__(self):
        self.started = time.perf_counter()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.started

        if exc_type is None:
            self.logger.info(f"Completed {self.operation} in {self.duration:.2f}s")
        elif issubclass(exc_type, CalculationError):
            self.logger.warning(f"Stopped {self.operation} after {self.duration:.2f}s: {exc_val}")
        else:
            self.logger.error(
                f"Failed {self.operation} after {self.duration:.2f}s: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )
        return False
