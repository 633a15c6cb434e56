"""
DMR Temperature Compliance Calculator

This package calculates the Maximum Weekly Average Temperature (MWAT) and the
Daily Maximum (DDMAX) of wastewater discharge temperatures for the monthly
Discharge Monitoring Report.
"""

__version__ = "0.1.0"
__description__ = "MWAT/DDMAX temperature compliance calculations for DMR reporting"


def __getattr__(name):
    """Lazy import to avoid loading the application when not needed."""
    if name == "ComplianceApp":
        from .main import ComplianceApp
        return ComplianceApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ComplianceApp",
]
