"""Millisecond stopwatch timer and randomised sleep helpers."""

__version__ = "0.1.0"
__all__ = ["timer"]