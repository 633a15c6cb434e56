"""
Temperature reading data models.

Contains DTOs for parsed sensor rows, merged readings and merge diagnostics.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Union


@dataclass(frozen=True)
class TemperatureReading:
    """Single temperature reading in facility-local time."""

    timestamp: datetime
    temperature: float  # °C
    was_averaged: bool = False
    source_count: int = 1


@dataclass(frozen=True)
class ValidRow:
    """Sensor row that parsed into a timestamp and a temperature."""

    timestamp: datetime
    temperature: float  # °C
    line_number: Optional[int] = None

    @property
    def valid(self) -> bool:
        return True


@dataclass(frozen=True)
class InvalidRow:
    """Sensor row that could not be parsed."""

    reason: str
    line_number: Optional[int] = None

    @property
    def valid(self) -> bool:
        return False


RawRow = Union[ValidRow, InvalidRow]


@dataclass(frozen=True)
class MergeStatistics:
    """Diagnostics of a multi-source merge."""

    source_record_counts: List[int] = field(default_factory=list)
    merged_count: int = 0
    overlaps_found: int = 0
    duplicates_removed: int = 0
    rows_dropped: int = 0
