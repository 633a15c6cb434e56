"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.dmr_temperature.models import TemperatureReading  # noqa: E402


def build_readings(start, days, interval_minutes=15, temperature=20.0):
    """
    Build evenly spaced readings.

    Args:
        start: First timestamp
        days: Number of days covered
        interval_minutes: Spacing between readings
        temperature: Constant value, or a callable taking the timestamp
    """
    readings = []
    step = timedelta(minutes=interval_minutes)
    end = start + timedelta(days=days)
    timestamp = start
    while timestamp < end:
        value = temperature(timestamp) if callable(temperature) else temperature
        readings.append(TemperatureReading(timestamp, value))
        timestamp += step
    return readings


@pytest.fixture
def make_readings():
    """Factory for evenly spaced readings."""
    return build_readings


@pytest.fixture
def april_readings():
    """Two weeks of constant 20 °C readings, 2025-04-01 through 2025-04-14."""
    return build_readings(datetime(2025, 4, 1), days=14)


@pytest.fixture
def base_config():
    """Minimal valid configuration dictionary."""
    return {
        "environment": "test",
        "processing": {
            "timezone": "UTC",
            "mwat_basis": "daily_mean",
            "week_alignment": "rolling",
            "reading_interval_minutes": 15,
            "temperature_unit": "celsius",
        },
        "input": {
            "header_rows": 2,
            "timestamp_column": 1,
            "temperature_column": 2,
        },
        "output": {"top_n": 5},
        "discharge": {"pattern": "continuous"},
    }


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration dictionary to a JSON file and return its path."""
    def _write(data, name="config.json"):
        path = tmp_path / name
        with open(path, "w") as f:
            json.dump(data, f)
        return path
    return _write


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep log files and environment overrides out of the working tree."""
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "test.log"))
    for name in ("FACILITY_TIMEZONE", "MWAT_BASIS", "WEEK_ALIGNMENT", "OUTPUT_DIR", "ENVIRONMENT", "CONFIG_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test reading and writing files"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
