"""
Discharge period data models.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ..core.exceptions import InvalidDischargePeriodError


class DischargePattern(str, Enum):
    """Operator-selected discharge schedule pattern."""

    CONTINUOUS = "continuous"
    SINGLE = "single"
    DAILY = "daily"
    CUSTOM = "custom"


@dataclass(frozen=True)
class DischargePeriod:
    """Interval during which effluent is discharged (bounds inclusive)."""

    start: datetime
    end: datetime
    label: str = ""

    def __post_init__(self):
        if self.start >= self.end:
            raise InvalidDischargePeriodError(
                f"Discharge period end ({self.end.isoformat()}) must be after "
                f"start ({self.start.isoformat()})"
            )

    def contains(self, timestamp: datetime) -> bool:
        """Check if a timestamp falls inside the period."""
        return self.start <= timestamp <= self.end

    @property
    def duration_hours(self) -> float:
        return (self.end - self.start).total_seconds() / 3600
