"""Client library for the RGS chronic-monitoring API."""

__version__ = "0.1.0"
