"""
Sensor file reading service.

Reads logger CSV exports into parsed rows. Exports start with a title row and
a column header row; the date/time is in column B and the temperature in
column C unless configured otherwise.
"""

import csv
import io
import logging
from pathlib import Path
from typing import List, Optional, TYPE_CHECKING

from ..core import constants
from ..models import InvalidRow, RawRow
from ..processing import RowParser

if TYPE_CHECKING:
    from ..core.config import Config


class SensorFileReader:
    """Read temperature sensor CSV exports."""

    def __init__(
        self,
        parser: Optional[RowParser] = None,
        header_rows: int = constants.DEFAULT_HEADER_ROWS,
        timestamp_column: int = constants.DEFAULT_TIMESTAMP_COLUMN,
        temperature_column: int = constants.DEFAULT_TEMPERATURE_COLUMN,
        delimiter: str = ",",
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize sensor file reader.

        Args:
            parser: Row parser (defaults to UTC, °C)
            header_rows: Rows to skip at the top of each file
            timestamp_column: Zero-based timestamp column index
            temperature_column: Zero-based temperature column index
            delimiter: Field delimiter
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.parser = parser or RowParser(logger=logger)
        self.header_rows = header_rows
        self.timestamp_column = timestamp_column
        self.temperature_column = temperature_column
        self.delimiter = delimiter

    @classmethod
    def from_config(
        cls,
        config: "Config",
        logger: Optional[logging.Logger] = None
    ) -> "SensorFileReader":
        """Create a reader from the 'input' and 'processing' configuration."""
        parser = RowParser(
            timezone_str=config.timezone,
            temperature_unit=config.temperature_unit,
            logger=logger,
        )
        return cls(
            parser=parser,
            header_rows=config.header_rows,
            timestamp_column=config.timestamp_column,
            temperature_column=config.temperature_column,
            delimiter=config.delimiter,
            logger=logger,
        )

    def read_file(self, path: Path) -> List[RawRow]:
        """
        Read one sensor file.

        Args:
            path: CSV file path

        Returns:
            Parsed rows, including invalid ones

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Sensor file not found: {path}")

        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            rows = self.read_text(f.read())

        valid = sum(1 for row in rows if row.valid)
        self.logger.info(f"Parsed {valid} records from {path.name} ({len(rows) - valid} invalid rows)")
        return rows

    def read_text(self, text: str) -> List[RawRow]:
        """
        Parse sensor CSV text.

        Args:
            text: File contents

        Returns:
            Parsed rows, including invalid ones
        """
        required_columns = max(self.timestamp_column, self.temperature_column) + 1
        rows: List[RawRow] = []

        reader = csv.reader(io.StringIO(text), delimiter=self.delimiter)
        for line_number, columns in enumerate(reader, start=1):
            if line_number <= self.header_rows:
                continue
            if not any(cell.strip() for cell in columns):
                continue
            if len(columns) < required_columns:
                rows.append(
                    InvalidRow(
                        reason=f"Expected at least {required_columns} columns, got {len(columns)}",
                        line_number=line_number,
                    )
                )
                continue

            rows.append(
                self.parser.parse_row(
                    columns[self.timestamp_column],
                    columns[self.temperature_column],
                    line_number=line_number,
                )
            )

        return rows
