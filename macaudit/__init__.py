"""Sectioned health report for a single macOS host."""

__version__ = "1.0.0"
