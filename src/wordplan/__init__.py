"""Spaced-repetition vocabulary study-plan generator."""

__version__ = "0.1.0"
