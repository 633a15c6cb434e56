"""
Main entry point for the DMR temperature compliance system.

Reads sensor files, merges them, and calculates the MWAT/DDMAX values of a
Discharge Monitoring Report month.
"""

import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Sequence

from .core import Config, setup_logger, LoggerContext, CalculationError
from .models import CalculationInput, ComplianceReport, MergeStatistics, TemperatureReading, YearMonth
from .processing import DataProcessor, DischargeSchedule
from .algorithms import ComplianceCalculator
from .services import ReportWriter, SensorFileReader


class ComplianceApp:
    """Main application for MWAT/DDMAX compliance calculation."""

    def __init__(self, config_file: Optional[str] = None, verbose: bool = False):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            verbose: Show debug messages on the console
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_file=self.config.log_file,
            log_level="DEBUG" if verbose else self.config.log_level,
            file_level=self.config.log_file_level,
        )
        self.logger.info("=" * 60)
        self.logger.info("DMR Temperature Compliance Calculator")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        self.reader = SensorFileReader.from_config(self.config, logger=self.logger)
        self.processor = DataProcessor(
            timezone_str=self.config.timezone,
            temperature_unit=self.config.temperature_unit,
            logger=self.logger,
        )
        self.schedule = DischargeSchedule(logger=self.logger)
        self.calculator = ComplianceCalculator(logger=self.logger)
        self.writer = ReportWriter(logger=self.logger)

        # Merged readings are kept so the same data can be re-analysed
        self.readings: List[TemperatureReading] = []
        self.merge_statistics: Optional[MergeStatistics] = None

    def load_sensor_files(self, paths: Sequence[Path]) -> List[TemperatureReading]:
        """
        Read and merge sensor files.

        Args:
            paths: Sensor CSV files, one per sensor

        Returns:
            Merged readings

        Raises:
            EmptyDatasetError: If no file contains a valid reading
        """
        with LoggerContext(self.logger, f"loading {len(paths)} sensor file(s)"):
            sources = [self.reader.read_file(Path(path)) for path in paths]
            self.readings, self.merge_statistics = self.processor.merge_sources(sources)

        return self.readings

    def run(
        self,
        analysis_month: Optional[YearMonth] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> ComplianceReport:
        """
        Calculate compliance for the loaded readings.

        Args:
            analysis_month: DMR month to report, or None for all weeks
            start_date: First day of data to use
            end_date: Last day of data to use

        Returns:
            Compliance report
        """
        if not self.readings:
            raise RuntimeError("No readings loaded. Call load_sensor_files() first.")

        discharge_periods = self.schedule.from_config(self.config.discharge)

        calculation_input = CalculationInput(
            readings=self.readings,
            discharge_periods=discharge_periods,
            analysis_month=analysis_month,
            start_date=start_date,
            end_date=end_date,
            mwat_basis=self.config.mwat_basis,
            week_alignment=self.config.week_alignment,
            restrict_weeks_to_discharge_period=self.config.restrict_weeks_to_discharge_period,
            reading_interval_minutes=self.config.reading_interval_minutes,
            merge_statistics=self.merge_statistics,
        )

        with LoggerContext(self.logger, "compliance calculation"):
            report = self.calculator.calculate(calculation_input)

        self.writer.log_report_summary(report, self.config.top_n)
        return report

    def default_output_path(self, analysis_month: Optional[YearMonth]) -> Path:
        """Report path inside the configured output directory."""
        suffix = str(analysis_month) if analysis_month else "all"
        return Path(self.config.output_directory) / f"MWAT_DailyMax_Results_{suffix}.csv"


def _parse_date(value: str) -> date:
    return datetime.strptime(value, "%Y-%m-%d").date()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="DMR Temperature Compliance Calculator (MWAT / Daily Maximum)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--sensor",
        action="append",
        required=True,
        help="Sensor CSV file (repeat for each sensor)"
    )
    parser.add_argument(
        "--month",
        type=str,
        default=None,
        help="DMR analysis month (YYYY-MM). Default: all weeks"
    )
    parser.add_argument(
        "--start-date",
        type=str,
        default=None,
        help="First day of data to use (YYYY-MM-DD)"
    )
    parser.add_argument(
        "--end-date",
        type=str,
        default=None,
        help="Last day of data to use (YYYY-MM-DD)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Report CSV path. Default: <output directory>/MWAT_DailyMax_Results_<month>.csv"
    )
    parser.add_argument(
        "--processed-output",
        type=str,
        default=None,
        help="Optional CSV path for the merged readings"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug messages (skipped windows, dropped rows) on the console"
    )

    args = parser.parse_args(argv)

    try:
        analysis_month = YearMonth.parse(args.month) if args.month else None
        start_date = _parse_date(args.start_date) if args.start_date else None
        end_date = _parse_date(args.end_date) if args.end_date else None
    except ValueError as e:
        print(f"Invalid argument: {e}")
        return 1

    try:
        app = ComplianceApp(config_file=args.config, verbose=args.verbose)
        app.load_sensor_files([Path(path) for path in args.sensor])
        report = app.run(analysis_month, start_date, end_date)

        output_path = Path(args.output) if args.output else app.default_output_path(analysis_month)
        app.writer.write_report(report, output_path)
        if args.processed_output:
            app.writer.write_processed_data(app.readings, Path(args.processed_output))
    except CalculationError as e:
        print(f"Calculation failed: {e}")
        return 1
    except Exception as e:
        print(f"Application failed: {e}")
        return 1

    if report.no_qualifying_weeks:
        month = analysis_month or "the selected data"
        print(f"No qualifying weeks for {month}; MWAT/DDMAX are not reportable.")
    else:
        print(f"MWAT: {report.overall_mwat:.3f} °C")
        print(f"DDMAX: {report.overall_ddmax:.3f} °C")
    print(f"Report written to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
