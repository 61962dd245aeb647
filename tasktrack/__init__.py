"""tasktrack - single-user task tracking."""

__version__ = "0.1.0"
