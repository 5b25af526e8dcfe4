"""JSON language trees, their position and screen indexes, and language CSV files for a metering display."""

__version__ = "0.0.1"