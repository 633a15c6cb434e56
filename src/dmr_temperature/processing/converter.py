"""
Unit conversion module.

Converts sensor temperatures to degrees Celsius.
"""

import logging
from typing import Optional

CELSIUS_NAMES = ["celsius", "c", "°c"]
FAHRENHEIT_NAMES = ["fahrenheit", "f", "°f"]
KELVIN_NAMES = ["kelvin", "k", "°k"]


class UnitConverter:
    """Convert between temperature units."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize unit converter.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def convert_temperature(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert temperature between units.

        Args:
            value: Temperature value
            from_unit: Source unit (celsius, fahrenheit, kelvin)
            to_unit: Target unit

        Returns:
            Converted temperature value

        Raises:
            ValueError: If either unit is unknown
        """
        from_unit_lower = from_unit.lower().strip()
        to_unit_lower = to_unit.lower().strip()
        self._check_unit(from_unit_lower)
        self._check_unit(to_unit_lower)

        if from_unit_lower == to_unit_lower:
            return value

        # Convert to Celsius first
        if from_unit_lower in FAHRENHEIT_NAMES:
            celsius = (value - 32) * 5 / 9
        elif from_unit_lower in KELVIN_NAMES:
            celsius = value - 273.15
        else:
            celsius = value

        # Convert from Celsius to target
        if to_unit_lower in FAHRENHEIT_NAMES:
            return celsius * 9 / 5 + 32
        elif to_unit_lower in KELVIN_NAMES:
            return celsius + 273.15
        else:
            return celsius

    def to_celsius(self, value: float, from_unit: str) -> float:
        """Convert a temperature in any supported unit to °C."""
        return self.convert_temperature(value, from_unit, "celsius")

    @staticmethod
    def _check_unit(unit: str) -> None:
        if unit not in CELSIUS_NAMES + FAHRENHEIT_NAMES + KELVIN_NAMES:
            raise ValueError(f"Unknown temperature unit: {unit}")
