"""
Daily Maximum (DDMAX) calculation module.

The regulatory Daily Maximum is the highest 2-hour average water temperature
recorded during a calendar day. A window is anchored at every reading and
covers [t, t + 2h]; it may reach into the following day.
"""

import logging
import math
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from ..core import constants
from ..models import DailyMaximumResult, TemperatureReading


class DailyMaximumCalculator:
    """Calculate the maximum 2-hour rolling average of each day."""

    def __init__(
        self,
        window_hours: float = constants.ROLLING_WINDOW_HOURS,
        min_readings: int = constants.MIN_WINDOW_READINGS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize daily maximum calculator.

        Args:
            window_hours: Rolling window length in hours
            min_readings: Minimum readings for a window to count
            logger: Logger instance
        """
        self.window = timedelta(hours=window_hours)
        self.min_readings = min_readings
        self.logger = logger or logging.getLogger(__name__)

    def calculate(self, readings: Sequence[TemperatureReading]) -> List[DailyMaximumResult]:
        """
        Calculate the Daily Maximum for every day that has readings.

        Each window averages every reading whose timestamp lies in
        [anchor, anchor + window], across day boundaries. Windows with fewer
        than min_readings readings are skipped. On equal averages the earliest
        window wins.

        Args:
            readings: Temperature readings (any order)

        Returns:
            One result per day with at least one qualifying window, sorted by date
        """
        ordered = sorted(readings, key=lambda reading: reading.timestamp)
        timestamps = [reading.timestamp for reading in ordered]
        temperatures = [reading.temperature for reading in ordered]
        count = len(ordered)

        best: Dict[date, DailyMaximumResult] = {}
        skipped = 0
        lower = 0
        upper = 0

        # Both window bounds only move forward as the anchor advances
        for anchor_index in range(count):
            anchor = timestamps[anchor_index]
            limit = anchor + self.window

            while timestamps[lower] < anchor:
                lower += 1
            while upper < count and timestamps[upper] <= limit:
                upper += 1

            window_count = upper - lower
            if window_count < self.min_readings:
                skipped += 1
                continue

            average = math.fsum(temperatures[lower:upper]) / window_count
            day = anchor.date()
            current = best.get(day)

            if current is None or average > current.temperature:
                best[day] = DailyMaximumResult(
                    date=day,
                    temperature=average,
                    window_reading_count=window_count,
                    time_range=(
                        f"{timestamps[lower]:%H:%M:%S} - {timestamps[upper - 1]:%H:%M:%S}"
                    ),
                    window_start=timestamps[lower],
                    window_end=timestamps[upper - 1],
                )

        if skipped:
            self.logger.debug(f"Skipped {skipped} windows with fewer than {self.min_readings} readings")

        results = [best[day] for day in sorted(best)]
        self.logger.info(f"Calculated daily maximums for {len(results)} days")
        return results
