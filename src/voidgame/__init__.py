"""Void: a text adventure with a turn-based battle engine."""

__version__ = "0.1.0"
