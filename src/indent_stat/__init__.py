"""Indentation statistics for text files."""

__version__ = "1.0.0"
