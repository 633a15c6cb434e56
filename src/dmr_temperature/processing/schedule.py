"""
Discharge schedule module.

Builds discharge period lists from the operator's discharge pattern:
continuous, a single period, a daily recurring window, or custom periods.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..models import DischargePattern, DischargePeriod


class DischargeSchedule:
    """Generate discharge periods for a discharge pattern."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize discharge schedule builder.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def continuous(self) -> List[DischargePeriod]:
        """Continuous discharge: no periods, so every reading is kept."""
        return []

    def single(self, start: datetime, end: datetime) -> List[DischargePeriod]:
        """One discharge period from start to end."""
        return self._finalize([(start, end)])

    def daily(
        self,
        start_date: date,
        end_date: date,
        start_time: time,
        end_time: time
    ) -> List[DischargePeriod]:
        """
        One discharge period per day between start_date and end_date.

        An end time at or before the start time describes an overnight
        discharge that ends on the following day.

        Args:
            start_date: First discharge day
            end_date: Last discharge day (inclusive)
            start_time: Daily discharge start
            end_time: Daily discharge end

        Returns:
            Discharge periods ordered by start
        """
        pairs = []
        day = start_date
        while day <= end_date:
            start = datetime.combine(day, start_time)
            end = datetime.combine(day, end_time)
            if end <= start:
                end += timedelta(days=1)
            pairs.append((start, end))
            day += timedelta(days=1)
        return self._finalize(pairs)

    def custom(self, pairs: Iterable[Tuple[datetime, datetime]]) -> List[DischargePeriod]:
        """Operator-entered discharge periods."""
        return self._finalize(list(pairs))

    def from_config(self, discharge_config: Dict[str, Any]) -> List[DischargePeriod]:
        """
        Build discharge periods from the 'discharge' configuration section.

        Expected keys per pattern:
            single: start, end (ISO datetimes)
            daily: start_date, end_date (ISO dates), start_time, end_time (HH:MM)
            custom: periods, a list of {start, end}

        Args:
            discharge_config: Discharge configuration dictionary

        Returns:
            Discharge periods ordered by start

        Raises:
            ValueError: If the pattern is unknown or required keys are missing
        """
        pattern = DischargePattern(discharge_config.get("pattern", DischargePattern.CONTINUOUS.value))

        try:
            if pattern == DischargePattern.CONTINUOUS:
                periods = self.continuous()
            elif pattern == DischargePattern.SINGLE:
                periods = self.single(
                    datetime.fromisoformat(discharge_config["start"]),
                    datetime.fromisoformat(discharge_config["end"]),
                )
            elif pattern == DischargePattern.DAILY:
                periods = self.daily(
                    date.fromisoformat(discharge_config["start_date"]),
                    date.fromisoformat(discharge_config["end_date"]),
                    time.fromisoformat(discharge_config["start_time"]),
                    time.fromisoformat(discharge_config["end_time"]),
                )
            else:
                if not discharge_config.get("periods"):
                    raise ValueError("Custom discharge pattern requires at least one period")
                periods = self.custom(
                    (datetime.fromisoformat(item["start"]), datetime.fromisoformat(item["end"]))
                    for item in discharge_config.get("periods", [])
                )
        except KeyError as e:
            raise ValueError(f"Missing discharge configuration key for '{pattern.value}' pattern: {e}")

        self.logger.info(f"Discharge pattern '{pattern.value}': {len(periods)} period(s)")
        return periods

    def _finalize(self, pairs: List[Tuple[datetime, datetime]]) -> List[DischargePeriod]:
        pairs = sorted(pairs, key=lambda pair: pair[0])
        periods = [
            DischargePeriod(start=start, end=end, label=f"Discharge Period {index + 1}")
            for index, (start, end) in enumerate(pairs)
        ]
        for period in periods:
            self.logger.debug(
                f"{period.label}: {period.start.isoformat()} - {period.end.isoformat()} "
                f"({period.duration_hours:.1f} h)"
            )
        return periods
