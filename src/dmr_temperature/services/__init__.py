"""
Services for the DMR temperature compliance system.

Provides sensor file reading and report writing.
"""

from .sensor_reader import SensorFileReader
from .report_writer import ReportWriter

__all__ = [
    "SensorFileReader",
    "ReportWriter",
]
