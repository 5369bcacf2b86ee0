"""Readable implementations of classic design patterns and two array algorithms."""

__version__ = "0.1.0"