"""Spice Haven restaurant website API."""

__version__ = "0.1.0"
