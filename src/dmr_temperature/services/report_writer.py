"""
Report writing service.

Exports compliance reports and processed readings as CSV, and reads the
summary block of an exported report back.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from ..core import constants
from ..models import ComplianceReport, TemperatureReading
from ..algorithms.projection import top_daily_maximums, top_weekly_periods

REPORT_TITLE = "DMR Temperature Calculation Results"
MWAT_LABEL = "Maximum Weekly Average Temperature (MWAT)"
DDMAX_LABEL = "Highest Daily Maximum Temperature"
WEEKLY_SECTION = "MWAT 7-Day Rolling Averages"
WEEKLY_HEADER = ["Period End Date", "Start Date", "Weekly Average (C)"]
DAILY_SECTION = "Daily Maximum Temperatures"
DAILY_HEADER = ["Date", "Daily Maximum (C)", "Time Range", "Reading Count"]
PROCESSED_HEADER = ["Date Time", "Temperature (C)", "Source"]

# Summary label -> report field
SUMMARY_LABELS = {
    "Analysis Month": "analysis_month",
    MWAT_LABEL: "overall_mwat",
    DDMAX_LABEL: "overall_ddmax",
    "MWAT Basis": "mwat_basis",
    "Total Readings": "total_readings",
    "Date Range": "date_range",
}


class ReportWriter:
    """Write compliance results to CSV files."""

    def __init__(
        self,
        decimals: int = constants.EXPORT_DECIMALS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize report writer.

        Args:
            decimals: Decimal places for temperatures
            logger: Logger instance
        """
        self.decimals = decimals
        self.logger = logger or logging.getLogger(__name__)

    def render_report(self, report: ComplianceReport) -> str:
        """
        Render a compliance report as CSV text.

        Args:
            report: Compliance report

        Returns:
            CSV text: summary block, weekly section, daily section
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")

        writer.writerow([REPORT_TITLE])
        writer.writerow(["Analysis Month", str(report.analysis_month) if report.analysis_month else "All"])
        writer.writerow([MWAT_LABEL, self._overall_value(report, report.overall_mwat)])
        writer.writerow([DDMAX_LABEL, self._overall_value(report, report.overall_ddmax)])
        writer.writerow(["MWAT Basis", report.mwat_basis.value])
        writer.writerow(["Total Readings", report.total_readings])
        writer.writerow(["Date Range", report.date_range])
        writer.writerow([])

        writer.writerow([WEEKLY_SECTION])
        writer.writerow(WEEKLY_HEADER)
        for week in report.weekly_results:
            writer.writerow([
                week.week_end.isoformat(),
                week.week_start.isoformat(),
                self._format(week.mwat),
            ])
        writer.writerow([])

        writer.writerow([DAILY_SECTION])
        writer.writerow(DAILY_HEADER)
        for day in report.daily_maximums:
            writer.writerow([
                day.date.isoformat(),
                self._format(day.temperature),
                day.time_range,
                day.window_reading_count,
            ])

        return buffer.getvalue()

    def write_report(self, report: ComplianceReport, path: Path) -> Path:
        """
        Write a compliance report CSV file.

        Args:
            report: Compliance report
            path: Output file path (parent directories are created)

        Returns:
            Path written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(self.render_report(report))

        self.logger.info(
            f"Wrote report to {path} ({len(report.weekly_results)} weeks, "
            f"{len(report.daily_maximums)} days)"
        )
        return path

    def read_summary(self, text: str) -> Dict[str, Any]:
        """
        Read the summary block of an exported report.

        Args:
            text: Report CSV text

        Returns:
            Dictionary with analysis_month, overall_mwat, overall_ddmax,
            mwat_basis, total_readings and date_range. Overall values are None
            when the report had no qualifying weeks.

        Raises:
            ValueError: If the text is not an exported report
        """
        rows = list(csv.reader(io.StringIO(text)))
        if not rows or rows[0] != [REPORT_TITLE]:
            raise ValueError("Not a DMR temperature report")

        summary: Dict[str, Any] = {}
        for row in rows[1:]:
            if not row:
                break
            key = SUMMARY_LABELS.get(row[0])
            if key is None or len(row) < 2:
                continue
            summary[key] = self._parse_summary_value(key, row[1])

        return summary

    def read_summary_file(self, path: Path) -> Dict[str, Any]:
        """Read the summary block of an exported report file."""
        with open(path, "r", encoding="utf-8", newline="") as f:
            return self.read_summary(f.read())

    def render_processed_data(self, readings: Sequence[TemperatureReading]) -> str:
        """Render merged readings as CSV text, marking averaged readings."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(PROCESSED_HEADER)
        for reading in readings:
            writer.writerow([
                reading.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
                self._format(reading.temperature),
                "Combined/Averaged" if reading.was_averaged else "Original",
            ])
        return buffer.getvalue()

    def write_processed_data(self, readings: Sequence[TemperatureReading], path: Path) -> Path:
        """Write merged readings to a CSV file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(self.render_processed_data(readings))

        self.logger.info(f"Wrote {len(readings)} processed readings to {path}")
        return path

    def log_report_summary(self, report: ComplianceReport, top_n: int = constants.DEFAULT_TOP_N) -> None:
        """
        Log the reportable values and the top weekly and daily results.

        Args:
            report: Compliance report
            top_n: Number of top rows to log
        """
        month = report.analysis_month or "all months"

        self.logger.info("=" * 60)
        self.logger.info(f"Compliance Summary ({month})")
        self.logger.info("=" * 60)
        self.logger.info(f"Readings used: {report.total_readings} ({report.date_range})")

        if report.no_qualifying_weeks:
            self.logger.warning(f"No qualifying weeks for {month}: MWAT/DDMAX not reportable")
            self.logger.info("=" * 60)
            return

        self.logger.info(f"MWAT: {self._format(report.overall_mwat)} °C")
        self.logger.info(f"DDMAX: {self._format(report.overall_ddmax)} °C")

        self.logger.info(f"Top {top_n} weekly periods:")
        for row in top_weekly_periods(report, top_n):
            self.logger.info(
                f"  {row['period_start_date']} - {row['period_end_date']}: "
                f"{self._format(row['weekly_average'])} °C"
            )

        self.logger.info(f"Top {top_n} daily maximums:")
        for row in top_daily_maximums(report, top_n):
            self.logger.info(
                f"  {row['date']} {row['time_range']}: "
                f"{self._format(row['temperature'])} °C ({row['reading_count']} readings)"
            )

        self.logger.info("=" * 60)

    def _format(self, value: float) -> str:
        return f"{value:.{self.decimals}f}"

    def _overall_value(self, report: ComplianceReport, value: float) -> str:
        if report.no_qualifying_weeks:
            return constants.NO_QUALIFYING_WEEKS_TEXT
        return self._format(value)

    @staticmethod
    def _parse_summary_value(key: str, text: str) -> Any:
        text = text.strip()
        if key in ("overall_mwat", "overall_ddmax"):
            if text == constants.NO_QUALIFYING_WEEKS_TEXT:
                return None
            return float(text.replace("°C", "").strip())
        if key == "total_readings":
            return int(text)
        return text
