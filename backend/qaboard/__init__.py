"""Minimal question-and-answer forum backend over JSON document storage."""

__version__ = "1.1.0"
