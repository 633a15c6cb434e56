"""
Reading merge module.

Combines parsed rows from one or more sensors into a single chronological
series, averaging readings that share a timestamp.
"""

import logging
import statistics
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.exceptions import EmptyDatasetError
from ..models import MergeStatistics, RawRow, TemperatureReading


class ReadingMerger:
    """Merge sensor sources into one reading sequence."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize reading merger.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def merge(
        self,
        sources: Sequence[Iterable[RawRow]]
    ) -> Tuple[List[TemperatureReading], MergeStatistics]:
        """
        Merge parsed rows from all sources.

        Timestamps are matched exactly, to the second. When several rows share
        a timestamp the merged temperature is their arithmetic mean.

        Args:
            sources: One iterable of RawRow per sensor source

        Returns:
            Tuple of (readings sorted by timestamp, merge statistics)

        Raises:
            EmptyDatasetError: If no valid row exists in any source
        """
        grouped: Dict[datetime, List[float]] = {}
        source_counts: List[int] = []
        rows_dropped = 0

        for index, source in enumerate(sources):
            valid_count = 0
            for row in source:
                if not row.valid:
                    rows_dropped += 1
                    self.logger.debug(f"Dropping row {row.line_number} of source {index + 1}: {row.reason}")
                    continue
                key = row.timestamp.replace(microsecond=0)
                grouped.setdefault(key, []).append(row.temperature)
                valid_count += 1
            source_counts.append(valid_count)
            self.logger.info(f"Source {index + 1}: {valid_count} valid records")

        if not grouped:
            raise EmptyDatasetError()

        readings: List[TemperatureReading] = []
        overlaps = 0
        for timestamp in sorted(grouped):
            temperatures = grouped[timestamp]
            if len(temperatures) == 1:
                readings.append(TemperatureReading(timestamp, temperatures[0]))
                continue
            overlaps += 1
            readings.append(
                TemperatureReading(
                    timestamp=timestamp,
                    temperature=statistics.mean(temperatures),
                    was_averaged=True,
                    source_count=len(temperatures),
                )
            )

        merge_statistics = MergeStatistics(
            source_record_counts=source_counts,
            merged_count=len(readings),
            overlaps_found=overlaps,
            duplicates_removed=sum(source_counts) - len(readings),
            rows_dropped=rows_dropped,
        )

        self.logger.info(
            f"Merged {sum(source_counts)} records into {len(readings)} readings "
            f"({overlaps} overlapping timestamps, {rows_dropped} invalid rows dropped)"
        )

        return readings, merge_statistics
