"""
Configuration module for the DMR temperature compliance system.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants
from .date_utils import DateUtils
from .logger import DEFAULT_LOG_FILE, parse_log_level

MWAT_BASIS_VALUES = ("daily_mean", "daily_maximum")
WEEK_ALIGNMENT_VALUES = ("rolling", "calendar")
DISCHARGE_PATTERN_VALUES = ("continuous", "single", "daily", "custom")
TEMPERATURE_UNIT_VALUES = ("celsius", "fahrenheit", "kelvin")


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("FACILITY_TIMEZONE"):
            self.config.setdefault("processing", {})["timezone"] = os.getenv("FACILITY_TIMEZONE")

        if os.getenv("MWAT_BASIS"):
            self.config.setdefault("processing", {})["mwat_basis"] = os.getenv("MWAT_BASIS")

        if os.getenv("WEEK_ALIGNMENT"):
            self.config.setdefault("processing", {})["week_alignment"] = os.getenv("WEEK_ALIGNMENT")

        if os.getenv("OUTPUT_DIR"):
            self.config.setdefault("output", {})["directory"] = os.getenv("OUTPUT_DIR")

        if os.getenv("LOG_LEVEL"):
            self.config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("LOG_FILE"):
            self.config.setdefault("logging", {})["file"] = os.getenv("LOG_FILE")

        # Environment
        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present and well-formed."""
        if "processing" not in self.config:
            raise ValueError("Missing required configuration sections: processing")

        if self.mwat_basis not in MWAT_BASIS_VALUES:
            raise ValueError(
                f"Invalid processing.mwat_basis: {self.mwat_basis} "
                f"(expected one of {', '.join(MWAT_BASIS_VALUES)})"
            )

        if self.week_alignment not in WEEK_ALIGNMENT_VALUES:
            raise ValueError(
                f"Invalid processing.week_alignment: {self.week_alignment} "
                f"(expected one of {', '.join(WEEK_ALIGNMENT_VALUES)})"
            )

        if self.temperature_unit not in TEMPERATURE_UNIT_VALUES:
            raise ValueError(
                f"Invalid processing.temperature_unit: {self.temperature_unit} "
                f"(expected one of {', '.join(TEMPERATURE_UNIT_VALUES)})"
            )

        if self.reading_interval_minutes <= 0:
            raise ValueError("processing.reading_interval_minutes must be positive")

        # Raises ValueError for unknown zones
        DateUtils.parse_timezone(self.timezone)

        # Raises ValueError for unknown level names
        parse_log_level(self.log_level)
        parse_log_level(self.log_file_level)

        pattern = self.get("discharge.pattern", "continuous")
        if pattern not in DISCHARGE_PATTERN_VALUES:
            raise ValueError(
                f"Invalid discharge.pattern: {pattern} "
                f"(expected one of {', '.join(DISCHARGE_PATTERN_VALUES)})"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'processing.timezone')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def timezone(self) -> str:
        """Get facility timezone."""
        return self.get("processing.timezone", constants.DEFAULT_TIMEZONE)

    @property
    def mwat_basis(self) -> str:
        """Get the daily statistic averaged into MWAT."""
        return self.get("processing.mwat_basis", "daily_mean")

    @property
    def week_alignment(self) -> str:
        """Get weekly window alignment (rolling or calendar)."""
        return self.get("processing.week_alignment", "rolling")

    @property
    def restrict_weeks_to_discharge_period(self) -> bool:
        """Check if weekly windows must stay inside one discharge period."""
        return self.get("processing.restrict_weeks_to_discharge_period", False)

    @property
    def reading_interval_minutes(self) -> float:
        """Get nominal sensor reading interval in minutes."""
        return self.get(
            "processing.reading_interval_minutes",
            constants.DEFAULT_READING_INTERVAL_MINUTES
        )

    @property
    def temperature_unit(self) -> str:
        """Get the temperature unit of the sensor files."""
        return self.get("processing.temperature_unit", "celsius")

    @property
    def header_rows(self) -> int:
        """Get number of header rows to skip in sensor files."""
        return self.get("input.header_rows", constants.DEFAULT_HEADER_ROWS)

    @property
    def timestamp_column(self) -> int:
        """Get zero-based timestamp column index."""
        return self.get("input.timestamp_column", constants.DEFAULT_TIMESTAMP_COLUMN)

    @property
    def temperature_column(self) -> int:
        """Get zero-based temperature column index."""
        return self.get("input.temperature_column", constants.DEFAULT_TEMPERATURE_COLUMN)

    @property
    def delimiter(self) -> str:
        """Get sensor file field delimiter."""
        return self.get("input.delimiter", ",")

    @property
    def output_directory(self) -> str:
        """Get report output directory."""
        return self.get("output.directory", "output")

    @property
    def top_n(self) -> int:
        """Get number of rows shown in top-N summaries."""
        return self.get("output.top_n", constants.DEFAULT_TOP_N)

    @property
    def discharge(self) -> Dict[str, Any]:
        """Get discharge schedule configuration."""
        return self.get("discharge", {"pattern": "continuous"})

    @property
    def log_level(self) -> str:
        """Get console log level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file_level(self) -> str:
        """Get log file level."""
        return self.get("logging.file_level", "DEBUG")

    @property
    def log_file(self) -> str:
        """Get log file path."""
        return self.get("logging.file", DEFAULT_LOG_FILE)

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, env={self.get('environment')})"
