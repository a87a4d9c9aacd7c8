"""Freerouting container runner."""

__version__ = "1.0.0"
