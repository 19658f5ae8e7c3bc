"""Typed parsing and formatting of common HTTP header fields."""

__version__ = "0.1.0"